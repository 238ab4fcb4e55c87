from pydantic import BaseModel, ConfigDict, Field


class SalonServiceBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    name: str
    price: float
    description: str


class CreateSalonService(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=1, description='Service name. Must be unique', examples=['Haircut'])
    price: float = Field(ge=0, description='Price of the service', examples=[25.0])
    description: str = Field(default='', examples=['Wash, cut and style'])
