"""worldmaps.areas.definitions

Standard area definitions. Each <area_name>.py file contains an `area_definition` dict
loaded by `worldmaps.areas.areas.Area`.
"""
