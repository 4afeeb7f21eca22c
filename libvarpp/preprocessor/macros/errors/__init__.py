from .invalid_definition_name import InvalidDefinitionNameError

__all__ = ["InvalidDefinitionNameError"]
