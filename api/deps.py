from fastapi import Request

from Hotels.hotel import Hotel


def get_hotel(request: Request) -> Hotel:
    '''Hotel created by the application lifespan.'''
    return request.app.state.hotel
