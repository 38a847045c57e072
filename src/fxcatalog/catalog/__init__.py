"""Static catalogs and the schema that guards catalog payloads."""
