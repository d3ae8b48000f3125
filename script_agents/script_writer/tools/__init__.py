"""
Tools for script writer agent.
"""

from .script_generator import GenerateScriptTool
from .sheet_generator import SheetScriptTool
from .batch_generator import BatchScriptTool
from .template_catalog import TemplateCatalogTool
from .script_archive import ScriptArchiveTool

__all__ = [
    'GenerateScriptTool',
    'SheetScriptTool',
    'BatchScriptTool',
    'TemplateCatalogTool',
    'ScriptArchiveTool'
]
