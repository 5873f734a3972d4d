from .catalog import CodeTemplateCatalog, default_catalog
from .generator import CodeGenerator

__all__ = ["CodeTemplateCatalog", "CodeGenerator", "default_catalog"]
