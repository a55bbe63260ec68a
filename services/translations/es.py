# -*- coding: utf-8 -*-
"""Spanish translations."""

ES_TRANSLATIONS = {
    # Validación de campos
    "validation.required": "Este campo es obligatorio.",
    "validation.min_length": "El texto es demasiado corto.",
    "validation.number_required": "Introduce un número.",
    "validation.number_invalid": "El valor debe ser un número.",
    "validation.object_required": "Completa esta sección.",
    "validation.list_required": "Añade los elementos requeridos.",
    "validation.loads.empty": "Añade al menos una carga.",
    "validation.loads.product_required": "Cada carga necesita un producto.",
    "validation.loads.total": "Los porcentajes de carga deben sumar 100%.",
    "validation.check_data": "Revisa los campos marcados.",

    # Resultado del guardado
    "save.success.submit": "Visita enviada correctamente.",
    "save.success.draft": "Borrador guardado.",
    "save.success.changes": "Cambios guardados.",

    # Errores - Guardado
    "error.save.invalid_data": "El servidor rechazó los datos. Revisa el formulario.",
    "error.save.unauthorized": "Tu sesión no permite esta operación. Vuelve a iniciar sesión.",
    "error.save.failed": "No se pudo guardar el registro. Inténtalo de nuevo.",

    # Errores - API
    "error.api.timeout": "El servidor tardó demasiado en responder.",
    "error.api.connection": "No se pudo conectar con el servidor. Comprueba tu conexión.",

    # Pasos del análisis de contenedores
    "wizard.container.steps.company.title": "Empresa",
    "wizard.container.steps.company.short_title": "Empresa",
    "wizard.container.steps.company.description": "Datos de la empresa y contacto",
    "wizard.container.steps.location.title": "Ubicación",
    "wizard.container.steps.location.short_title": "Ubicación",
    "wizard.container.steps.location.description": "Dirección de la instalación",
    "wizard.container.steps.commercial.title": "Comercial",
    "wizard.container.steps.commercial.short_title": "Comercial",
    "wizard.container.steps.commercial.description": "Distribuidor y cliente final",
    "wizard.container.steps.product.title": "Descripción del producto",
    "wizard.container.steps.product.short_title": "Producto",
    "wizard.container.steps.product.description": "Describe el producto manipulado",
    "wizard.container.steps.container.title": "Contenedores",
    "wizard.container.steps.container.short_title": "Contenedores",
    "wizard.container.steps.container.description": "Tipos de contenedor y volumen semanal",
    "wizard.container.steps.measurements.title": "Medidas",
    "wizard.container.steps.measurements.short_title": "Medidas",
    "wizard.container.steps.measurements.description": "Medidas de los contenedores",
    "wizard.container.steps.files.title": "Archivos",
    "wizard.container.steps.files.short_title": "Archivos",
    "wizard.container.steps.files.description": "Fotos, vídeos y documentos",

    # Pasos del análisis logístico
    "wizard.logistics.steps.customer_data.title": "Datos del cliente",
    "wizard.logistics.steps.customer_data.short_title": "Cliente",
    "wizard.logistics.steps.customer_data.description": "Datos del cliente y distribuidor",
    "wizard.logistics.steps.operation.title": "Operación",
    "wizard.logistics.steps.operation.short_title": "Operación",
    "wizard.logistics.steps.operation.description": "Descripción de la operación",
    "wizard.logistics.steps.application.title": "Aplicación",
    "wizard.logistics.steps.application.short_title": "Aplicación",
    "wizard.logistics.steps.application.description": "Datos de aplicación y alimentación",
    "wizard.logistics.steps.electrical_equipment.title": "Equipos eléctricos",
    "wizard.logistics.steps.electrical_equipment.short_title": "Eléctricos",
    "wizard.logistics.steps.electrical_equipment.description": "Baterías y suministro eléctrico",
    "wizard.logistics.steps.loads.title": "Cargas",
    "wizard.logistics.steps.loads.short_title": "Cargas",
    "wizard.logistics.steps.loads.description": "Dimensiones y reparto de las cargas",
    "wizard.logistics.steps.aisle.title": "Pasillo actual",
    "wizard.logistics.steps.aisle.short_title": "Pasillo",
    "wizard.logistics.steps.aisle.description": "Pasillo y estanterías actuales",
    "wizard.logistics.steps.files.title": "Archivos",
    "wizard.logistics.steps.files.short_title": "Archivos",
    "wizard.logistics.steps.files.description": "Fotos, vídeos y documentos",

    # Pasos de la inspección de vehículos
    "wizard.inspection.steps.vehicle_data.title": "Vehículo",
    "wizard.inspection.steps.vehicle_data.short_title": "Vehículo",
    "wizard.inspection.steps.vehicle_data.description": "Vehículo y kilometraje",
    "wizard.inspection.steps.checklist.title": "Checklist",
    "wizard.inspection.steps.checklist.short_title": "Checklist",
    "wizard.inspection.steps.checklist.description": "Niveles, pedales y luces",
    "wizard.inspection.steps.photos.title": "Fotos",
    "wizard.inspection.steps.photos.short_title": "Fotos",
    "wizard.inspection.steps.photos.description": "Seis fotos del vehículo",
    "wizard.inspection.steps.observations.title": "Observaciones",
    "wizard.inspection.steps.observations.short_title": "Notas",
    "wizard.inspection.steps.observations.description": "Comentarios adicionales",
    "wizard.inspection.steps.signature.title": "Firma",
    "wizard.inspection.steps.signature.short_title": "Firma",
    "wizard.inspection.steps.signature.description": "Firma del inspector",
}
