class GraphQLModuleError(Exception):
    """Base exception for the GraphQL module"""
    pass


class ModuleConfigurationError(GraphQLModuleError):
    """Module wired without a configuration or schema"""
    pass


class GraphiQLAssetNotFoundError(GraphQLModuleError):
    """Bundled GraphiQL page cannot be located"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"GraphiQL asset not found at {path}")
