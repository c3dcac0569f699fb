"""Pydantic contracts for the JSON payloads of the API under test."""

from collections.abc import Sequence
from typing import Annotated, Any

from pydantic import Field, StrictFloat, StrictInt

from site_smoke.models.base import Model


class Company(Model):
    """Company block of the info payload."""

    name: str = Field(min_length=1)


class CompanyStats(Model):
    """Headline figures of the info payload."""

    total_employees: StrictInt | StrictFloat = Field(alias="totalEmployees")


class BritEdgeInfo(Model):
    """Response from GetBritEdgeInfo."""

    company: Company
    stats: CompanyStats
    locations: Sequence[Any] = Field(min_length=1)


class Testimonial(Model):
    """A single client testimonial."""

    __test__ = False

    client: str = Field(min_length=1)
    rating: float = Field(gt=0)


class TestimonialsResponse(Model):
    """Response from GetTestimonials."""

    __test__ = False

    testimonials: Sequence[Testimonial] = Field(min_length=1)


# Zero and the empty string are not valid identifiers
CustomerId = Annotated[StrictInt, Field(gt=0)] | Annotated[str, Field(min_length=1)]


class Customer(Model):
    """A single customer record."""

    customer_id: CustomerId = Field(alias="customerId")
    company_name: str = Field(alias="companyName", min_length=1)


class CustomersResponse(Model):
    """Response from GetCustomers."""

    customers: Sequence[Customer] = Field(min_length=1)
