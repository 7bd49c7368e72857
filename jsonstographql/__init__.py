import importlib

mod = "jsonstographql"
class LazyLoader:
    """
    Lazy loader for the jsonstographql functions to defer importing
    graphql-core until a conversion function is used.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, attr_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, attr_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the public names and their corresponding module paths
_mappings = {
    "new_context": (f"{mod}.context", "new_context"),
    "SchemaContext": (f"{mod}.context", "SchemaContext"),
    "convert": (f"{mod}.jsonstographql", "convert"),
    "convert_all": (f"{mod}.jsonstographql", "convert_all"),
    "build_graphql_schema": (f"{mod}.jsonstographql", "build_graphql_schema"),
    "print_graphql_schema": (f"{mod}.jsonstographql", "print_graphql_schema"),
    "resolve_fields": (f"{mod}.jsonstographql", "resolve_fields"),
    "convert_jsons_to_graphql": (f"{mod}.jsonstographql", "convert_jsons_to_graphql"),
    "INPUT_SUFFIX": (f"{mod}.jsonstographql", "INPUT_SUFFIX"),
    "get_convert_enum_from_graphql_code": (f"{mod}.enumtocode", "get_convert_enum_from_graphql_code"),
    "get_all_enum_converters_code": (f"{mod}.enumtocode", "get_all_enum_converters_code"),
    "SchemaConversionError": (f"{mod}.errors", "SchemaConversionError"),
    "UnknownTypeReference": (f"{mod}.errors", "UnknownTypeReference"),
    "UnsupportedScalarType": (f"{mod}.errors", "UnsupportedScalarType"),
    "UnsupportedEnumBaseType": (f"{mod}.errors", "UnsupportedEnumBaseType"),
    "MissingEnumRegistration": (f"{mod}.errors", "MissingEnumRegistration"),
    "DuplicateEnumKey": (f"{mod}.errors", "DuplicateEnumKey"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)
