# -*- coding: utf-8 -*-
"""Default form values of the container analysis wizard."""

from typing import Any, Dict, Mapping

from ui.wizards.framework.form_values import first_of, merge_record_values

DATE_FIELDS = ("closing_date",)


def blank_values() -> Dict[str, Any]:
    return {
        # Company
        "company_name": "",
        "contact_person": "",
        "email": "",
        "tax_id": "",
        "website": "",
        # Location
        "address": "",
        "city": "",
        "postal_code": "",
        "state": "",
        "country": "",
        # Commercial
        "distributor": "",
        "distributor_contact": "",
        "end_customer_data": "",
        # Product
        "product_description": "",
        "closing_date": None,
        # Container
        "container_types": [],
        "containers_per_week": None,
        "floor_conditions": "",
        # Measurements
        "container_measures": [],
        "other_measure": "",
        # Files
        "files": [],
    }


CONTAINER_FORM_FIELDS = tuple(blank_values())


def values_for_new(customer: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Blank values prefilled from a CRM customer.

    Billing address fields take precedence over shipping ones.
    """
    values = blank_values()
    values.update({
        "company_name": first_of(customer, "company_name", "account_name"),
        "contact_person": first_of(customer, "owner_name"),
        "email": first_of(customer, "email"),
        "tax_id": first_of(customer, "tax_id"),
        "website": first_of(customer, "website"),
        "address": first_of(customer, "billing_street", "shipping_street"),
        "city": first_of(customer, "billing_city", "shipping_city"),
        "state": first_of(customer, "billing_state", "shipping_state", "region"),
        "country": first_of(customer, "billing_country", "shipping_country"),
        "postal_code": first_of(customer, "billing_code", "shipping_code"),
        "distributor": first_of(customer, "owner_name"),
        "distributor_contact": first_of(customer, "owner_email"),
    })
    return values


def values_for_edit(form_data: Mapping[str, Any]) -> Dict[str, Any]:
    """Values of a persisted record."""
    return merge_record_values(blank_values(), form_data, DATE_FIELDS)
