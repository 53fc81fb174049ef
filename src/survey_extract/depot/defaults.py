"""
Embedded Depot configuration, used when no JSON document can be loaded.

These match the packaged survey_extract/data/*.json documents.
"""

from ..models.depot import ChecklistConfig, DepotSectionSchema

DEPOT_SCHEMA_FILE = "depot-schema.json"
CHECKLIST_CONFIG_FILE = "checklist-config.json"

DEFAULT_DEPOT_SCHEMA = DepotSectionSchema.model_validate({
    "sections": [
        {
            "key": "customer_summary",
            "name": "Customer Summary",
            "description": "Brief overview of customer needs and key points from the conversation",
            "order": 1,
            "required": True,
        },
        {
            "key": "existing_system",
            "name": "Existing System",
            "description": "Current heating system details including boiler type, age, and condition",
            "order": 2,
            "required": True,
        },
        {
            "key": "property_details",
            "name": "Property Details",
            "description": "Property type, size, construction details, and insulation",
            "order": 3,
            "required": True,
        },
        {
            "key": "radiators_emitters",
            "name": "Radiators & Emitters",
            "description": "Details of existing radiators, underfloor heating, and heat emitters",
            "order": 4,
            "required": False,
        },
        {
            "key": "pipework",
            "name": "Pipework",
            "description": "Pipe sizes, materials, routing, and condition",
            "order": 5,
            "required": True,
        },
        {
            "key": "flue_ventilation",
            "name": "Flue & Ventilation",
            "description": "Flue type, routing, ventilation requirements",
            "order": 6,
            "required": True,
        },
        {
            "key": "hot_water",
            "name": "Hot Water",
            "description": "Hot water cylinder details, capacity, and configuration",
            "order": 7,
            "required": False,
        },
        {
            "key": "controls",
            "name": "Controls",
            "description": "Current controls, thermostats, and smart heating systems",
            "order": 8,
            "required": False,
        },
        {
            "key": "electrical",
            "name": "Electrical",
            "description": "Electrical supply, consumer unit, earth bonding, and capacity",
            "order": 9,
            "required": True,
        },
        {
            "key": "gas_supply",
            "name": "Gas Supply",
            "description": "Gas meter location, pipe size, and supply details",
            "order": 10,
            "required": False,
        },
        {
            "key": "water_supply",
            "name": "Water Supply",
            "description": "Mains water pressure, supply pipe, and stop cock details",
            "order": 11,
            "required": False,
        },
        {
            "key": "location_access",
            "name": "Location & Access",
            "description": "Proposed boiler location, access for installation, and constraints",
            "order": 12,
            "required": True,
        },
        {
            "key": "materials_parts",
            "name": "Materials & Parts",
            "description": "List of materials, parts, and components required for the job",
            "order": 13,
            "required": False,
        },
        {
            "key": "hazards_risks",
            "name": "Hazards & Risks",
            "description": "Safety concerns, asbestos, accessibility issues, and risk assessments",
            "order": 14,
            "required": True,
        },
        {
            "key": "customer_requests",
            "name": "Customer Requests",
            "description": "Specific customer requirements, preferences, and special requests",
            "order": 15,
            "required": False,
        },
        {
            "key": "follow_up_actions",
            "name": "Follow-up Actions",
            "description": "Actions required before quoting or installing",
            "order": 16,
            "required": False,
        },
    ]
})

DEFAULT_CHECKLIST_CONFIG = ChecklistConfig.model_validate({
    "checklist_items": [
        {
            "id": "boiler_replacement",
            "label": "Boiler Replacement",
            "category": "primary_work",
            "associated_materials": ["boiler", "flue_kit", "condensate_pipe", "filling_loop"],
        },
        {
            "id": "system_flush",
            "label": "System Flush/Cleanse",
            "category": "system_work",
            "associated_materials": ["inhibitor", "cleaner", "filter"],
        },
        {
            "id": "pipework_modification",
            "label": "Pipework Modifications",
            "category": "system_work",
            "associated_materials": ["copper_pipe_15mm", "copper_pipe_22mm", "fittings", "isolation_valves"],
        },
        {
            "id": "radiator_upgrade",
            "label": "Radiator Upgrade/Addition",
            "category": "emitters",
            "associated_materials": ["radiator", "trv", "radiator_valves"],
        },
        {
            "id": "cylinder_replacement",
            "label": "Hot Water Cylinder Replacement",
            "category": "hot_water",
            "associated_materials": ["cylinder", "immersion_heater", "cylinder_thermostat", "tundish"],
        },
        {
            "id": "controls_upgrade",
            "label": "Controls Upgrade",
            "category": "controls",
            "associated_materials": ["programmer", "room_thermostat", "wireless_receiver"],
        },
        {
            "id": "gas_work",
            "label": "Gas Supply Work",
            "category": "services",
            "associated_materials": ["gas_pipe_22mm", "gas_pipe_28mm", "gas_isolation_valve", "regulator"],
        },
        {
            "id": "electrical_work",
            "label": "Electrical Work",
            "category": "services",
            "associated_materials": ["fused_spur", "cable", "earth_bonding"],
        },
        {
            "id": "flue_modification",
            "label": "Flue Modifications",
            "category": "ventilation",
            "associated_materials": ["flue_kit", "plume_kit", "flue_brackets"],
        },
        {
            "id": "filter_installation",
            "label": "Magnetic Filter Installation",
            "category": "system_work",
            "associated_materials": ["magnetic_filter"],
        },
    ],
    "material_aliases": {
        "boiler": ["combi", "system boiler", "regular boiler", "back boiler"],
        "radiator": ["rad", "rads", "radiators"],
        "trv": ["thermostatic valve", "TRV", "trv valve"],
        "copper_pipe_15mm": ["15mm pipe", "half inch pipe"],
        "copper_pipe_22mm": ["22mm pipe", "three quarter pipe"],
        "microbore": ["8mm", "10mm", "micro bore"],
        "inhibitor": ["fernox", "sentinel", "system inhibitor"],
        "magnetic_filter": ["magnaclean", "filter", "system filter"],
    },
})
