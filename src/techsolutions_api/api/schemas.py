"""
techsolutions_api.api.schemas

Request/response models for the HTTP surface.

Every response is an envelope `{success, message, ...payload}`. Field names
are camelCase on the wire; request bodies accept camelCase or snake_case.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from techsolutions_api.db.models import Service, dump_features
from techsolutions_api.db.repositories.services import ServiceFields
from techsolutions_api.services.auth_service import UserView


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(CamelModel):
    success: bool = True
    message: str


class ErrorEnvelope(Envelope):
    success: bool = False
    errors: list[str] | None = None
    error: str | None = None


# --- auth -------------------------------------------------------------------


class LoginRequest(CamelModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)

    @field_validator("email")
    @classmethod
    def _email_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class UserOut(CamelModel):
    user_id: int
    email: str
    full_name: str | None
    role: str

    @classmethod
    def from_view(cls, view: UserView) -> UserOut:
        return cls(
            user_id=view.user_id,
            email=view.email,
            full_name=view.full_name,
            role=view.role,
        )


class LoginResponse(Envelope):
    token: str
    user: UserOut


class ValidateResponse(Envelope):
    # String form of the `sub` claim, as existing clients expect.
    user_id: str


# --- services ---------------------------------------------------------------


class ServiceIn(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    price: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    category: str = Field(min_length=1, max_length=100)
    stock: int = Field(default=0, ge=0)
    in_promotion: bool = False
    discount_percent: int = Field(default=0, ge=0, le=100)
    image_url: str | None = Field(default=None, max_length=500)
    features: list[str] = Field(default_factory=list)

    @field_validator("name", "category")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("features")
    @classmethod
    def _features_fit_column(cls, v: list[str]) -> list[str]:
        if len(dump_features(v)) > 1000:
            raise ValueError("serialized feature list exceeds 1000 characters")
        return v

    def to_fields(self) -> ServiceFields:
        return ServiceFields(
            name=self.name,
            description=self.description,
            price=self.price,
            category=self.category,
            stock=self.stock,
            in_promotion=self.in_promotion,
            discount_percent=self.discount_percent,
            image_url=self.image_url,
            features=list(self.features),
        )


class ServiceOut(CamelModel):
    service_id: int
    name: str
    description: str | None
    price: Decimal
    category: str
    stock: int
    in_promotion: bool
    discount_percent: int
    image_url: str | None
    features: list[str]
    created_at: datetime
    updated_at: datetime
    created_by: int | None

    @field_serializer("price")
    def _price_as_number(self, v: Decimal) -> float:
        return float(v)

    @classmethod
    def from_row(cls, row: Service) -> ServiceOut:
        return cls(
            service_id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            category=row.category,
            stock=row.stock,
            in_promotion=row.in_promotion,
            discount_percent=row.discount_percent,
            image_url=row.image_url,
            features=row.feature_list,
            created_at=row.created_at,
            updated_at=row.updated_at,
            created_by=row.created_by,
        )


class ServiceResponse(Envelope):
    data: ServiceOut


class ServiceListResponse(Envelope):
    data: list[ServiceOut]
    count: int

    @classmethod
    def of(cls, message: str, rows: list[Service]) -> ServiceListResponse:
        data = [ServiceOut.from_row(r) for r in rows]
        return cls(message=message, data=data, count=len(data))
