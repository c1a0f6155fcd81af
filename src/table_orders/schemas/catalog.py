from pydantic import BaseModel, constr


class TableCreate(BaseModel):
    code: constr(strip_whitespace=True, min_length=1, max_length=32)


class TableOut(BaseModel):
    id: int
    code: str

    class Config:
        from_attributes = True


class MenuCreate(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=128)


class MenuOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class CreatedId(BaseModel):
    id: int
