'''
Structure classes for the Hotels module: the room variants.
'''
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator

class Room(BaseModel):
    '''Fields shared by every room variant.'''

    number : int = Field(gt=0, frozen=True)
    price : Decimal
    is_available : bool = True

    @model_validator(mode="after")
    def validate_structure(self):
        # enforce non-negative price
        if self.price < 0:
            raise ValueError("Room price must be a non-negative amount.")
        return self

    def offered_bed_size(self) -> Optional[str]:
        '''Bed size used by the availability filter, None when the variant has none.'''
        return None

    def to_dict(self) -> dict:
        """
        Serialize the room into a dictionary.

        Returns:
            dict: Mapping with the price rendered as a string.
        """
        return self.model_dump(mode="json")


class SingleRoom(Room):

    kind : Literal['single'] = 'single'
    bed_size : str
    has_balcony : bool = False

    def offered_bed_size(self) -> Optional[str]:
        return self.bed_size


class DoubleRoom(Room):

    kind : Literal['double'] = 'double'
    bed_size : str
    has_mini_bar : bool = False
    number_of_beds : int = Field(default=2, gt=0)

    def offered_bed_size(self) -> Optional[str]:
        return self.bed_size


class Suite(Room):

    kind : Literal['suite'] = 'suite'
    living_area_size : float = Field(gt=0)
    has_jacuzzi : bool = False
    number_of_rooms : int = Field(default=1, gt=0)


AnyRoom = Annotated[Union[SingleRoom, DoubleRoom, Suite], Field(discriminator="kind")]
