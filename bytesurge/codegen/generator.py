from __future__ import annotations
from typing import Dict, Optional

from ..utils import RandomSource
from .catalog import PLACEHOLDER_RE, CodeTemplateCatalog, default_catalog


class CodeGenerator:
    """Turns a random catalog template into a concrete code block."""

    def __init__(self, rng: RandomSource, catalog: Optional[CodeTemplateCatalog] = None):
        self.rng = rng
        self.catalog = catalog if catalog is not None else default_catalog()

    def next(self) -> str:
        template = self.rng.choose(self.catalog.templates)
        values: Dict[str, str] = {
            name: self.rng.choose(self.catalog.pools[name])
            for name in self.catalog.tokens(template)
        }
        # Same pattern as token discovery, so literal "{{name}}" is left alone
        return PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)
