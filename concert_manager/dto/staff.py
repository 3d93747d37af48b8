from pydantic import Field

from concert_manager.dto import BaseSchema


class StaffCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=100)
    role: str = Field(min_length=1, max_length=100)

class Staff(BaseSchema):
    staff_id: int
    name: str
    role: str

    @classmethod
    def from_entity(cls, staff) -> "Staff":
        return cls(staff_id=staff.id, name=staff.name, role=staff.role)
