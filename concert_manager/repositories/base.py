from typing import TypeVar, Generic, Any
from concert_manager.utils.database import db_session_context
from concert_manager.utils.exceptions import NotFoundError
ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")

class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: type[ModelType], label: str, id_field: str = "id"):
        self.model = model
        self.label = label
        self.id = id_field

    def get(self, id: Any) -> ModelType | None:
        db = db_session_context.get()
        return db.query(self.model).filter(getattr(self.model, self.id) == id).first()

    def get_existing(self, id: Any, message: str | None = None) -> ModelType:
        obj = self.get(id)
        if obj is None:
            raise NotFoundError(message or f"{self.label} not found")
        return obj

    def list(self, *order_by) -> list[ModelType]:
        db = db_session_context.get()
        return db.query(self.model).order_by(*order_by).all()

    def create(self, obj_in: CreateSchemaType) -> ModelType:
        db = db_session_context.get()
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, id: Any, obj_in: UpdateSchemaType) -> ModelType:
        """
        Update an existing record with the fields the client actually sent.
        """
        db = db_session_context.get()
        obj = self.get_existing(id)

        for key, value in obj_in.model_dump(exclude_unset=True).items():
            if value is None and not self.model.__table__.c[key].nullable:
                raise ValueError(f"{key} cannot be null")
            setattr(obj, key, value)
        db.commit()
        db.refresh(obj)
        return obj

    def delete(self, id: Any) -> ModelType:
        db = db_session_context.get()
        obj = self.get_existing(id)
        db.delete(obj)
        db.commit()
        return obj
