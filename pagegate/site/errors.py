"""Errors raised while loading the business configuration."""


class SiteConfigError(Exception):
    """The business configuration is unusable and the build must stop."""


class DuplicateSlugError(SiteConfigError):
    """A slug appears more than once within a catalog."""

    def __init__(self, catalog: str, slugs: list[str]):
        self.catalog = catalog
        self.slugs = slugs
        super().__init__(f"Duplicate slug(s) in {catalog}: {', '.join(slugs)}")
