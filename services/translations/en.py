# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Field validation
    "validation.required": "This field is required.",
    "validation.min_length": "The text is too short.",
    "validation.number_required": "Enter a number.",
    "validation.number_invalid": "The value must be a number.",
    "validation.object_required": "Complete this section.",
    "validation.list_required": "Add the required items.",
    "validation.loads.empty": "Add at least one load.",
    "validation.loads.product_required": "Every load needs a product.",
    "validation.loads.total": "Load percentages must add up to 100%.",
    "validation.check_data": "Please review the highlighted fields.",

    # Save outcomes
    "save.success.submit": "Visit submitted successfully.",
    "save.success.draft": "Draft saved.",
    "save.success.changes": "Changes saved.",

    # Error Messages - Save
    "error.save.invalid_data": "The server rejected the data. Please review the form.",
    "error.save.unauthorized": "Your session does not allow this operation. Please sign in again.",
    "error.save.failed": "The record could not be saved. Please try again.",

    # Error Messages - API
    "error.api.timeout": "The server took too long to respond.",
    "error.api.connection": "Could not connect to the server. Check your connection.",

    # Container analysis steps
    "wizard.container.steps.company.title": "Company",
    "wizard.container.steps.company.short_title": "Company",
    "wizard.container.steps.company.description": "Company and contact details",
    "wizard.container.steps.location.title": "Location",
    "wizard.container.steps.location.short_title": "Location",
    "wizard.container.steps.location.description": "Address of the facility",
    "wizard.container.steps.commercial.title": "Commercial",
    "wizard.container.steps.commercial.short_title": "Commercial",
    "wizard.container.steps.commercial.description": "Distributor and end customer",
    "wizard.container.steps.product.title": "Product description",
    "wizard.container.steps.product.short_title": "Product",
    "wizard.container.steps.product.description": "Describe the handled product",
    "wizard.container.steps.container.title": "Containers",
    "wizard.container.steps.container.short_title": "Containers",
    "wizard.container.steps.container.description": "Container types and weekly volume",
    "wizard.container.steps.measurements.title": "Measurements",
    "wizard.container.steps.measurements.short_title": "Measures",
    "wizard.container.steps.measurements.description": "Container measurements",
    "wizard.container.steps.files.title": "Files",
    "wizard.container.steps.files.short_title": "Files",
    "wizard.container.steps.files.description": "Photos, videos and documents",

    # Logistics analysis steps
    "wizard.logistics.steps.customer_data.title": "Customer data",
    "wizard.logistics.steps.customer_data.short_title": "Customer",
    "wizard.logistics.steps.customer_data.description": "Customer and distributor details",
    "wizard.logistics.steps.operation.title": "Operation",
    "wizard.logistics.steps.operation.short_title": "Operation",
    "wizard.logistics.steps.operation.description": "Description of the operation",
    "wizard.logistics.steps.application.title": "Application",
    "wizard.logistics.steps.application.short_title": "Application",
    "wizard.logistics.steps.application.description": "Application data and power source",
    "wizard.logistics.steps.electrical_equipment.title": "Electrical equipment",
    "wizard.logistics.steps.electrical_equipment.short_title": "Electrical",
    "wizard.logistics.steps.electrical_equipment.description": "Batteries and electrical supply",
    "wizard.logistics.steps.loads.title": "Loads",
    "wizard.logistics.steps.loads.short_title": "Loads",
    "wizard.logistics.steps.loads.description": "Load dimensions and share",
    "wizard.logistics.steps.aisle.title": "Current aisle",
    "wizard.logistics.steps.aisle.short_title": "Aisle",
    "wizard.logistics.steps.aisle.description": "Current aisle and racking",
    "wizard.logistics.steps.files.title": "Files",
    "wizard.logistics.steps.files.short_title": "Files",
    "wizard.logistics.steps.files.description": "Photos, videos and documents",

    # Vehicle inspection steps
    "wizard.inspection.steps.vehicle_data.title": "Vehicle",
    "wizard.inspection.steps.vehicle_data.short_title": "Vehicle",
    "wizard.inspection.steps.vehicle_data.description": "Vehicle and mileage",
    "wizard.inspection.steps.checklist.title": "Checklist",
    "wizard.inspection.steps.checklist.short_title": "Checklist",
    "wizard.inspection.steps.checklist.description": "Fluids, pedals and lights",
    "wizard.inspection.steps.photos.title": "Photos",
    "wizard.inspection.steps.photos.short_title": "Photos",
    "wizard.inspection.steps.photos.description": "Six photos of the vehicle",
    "wizard.inspection.steps.observations.title": "Observations",
    "wizard.inspection.steps.observations.short_title": "Notes",
    "wizard.inspection.steps.observations.description": "Additional remarks",
    "wizard.inspection.steps.signature.title": "Signature",
    "wizard.inspection.steps.signature.short_title": "Signature",
    "wizard.inspection.steps.signature.description": "Inspector signature",
}
