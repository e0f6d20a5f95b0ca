"""
Pydantic schemas for the concat-text build plugin.
"""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ConcatOptions(BaseModel):
    """Raw options passed to the ConcatTextPlugin."""
    model_config = ConfigDict(populate_by_name=True)

    files: str = Field(..., description="Glob pattern of the files to concatenate")
    output_path: Optional[str] = Field(default=None, alias="outputPath")
    name: Optional[str] = None
    sort: bool = False
    separator: str = "\n"


class ResolvedConcatOptions(BaseModel):
    """Options after setup: every path resolved, read-only from here on."""
    model_config = ConfigDict(frozen=True)

    files: str
    output_path: str
    name: str
    target: str
    sort: bool = False
    separator: str = "\n"


class OutputOptions(BaseModel):
    """Where the build writes its assets."""
    path: str
    filename: str = "main.js"


class CompilerOptions(BaseModel):
    """Host build configuration seen by plugins."""
    context: str
    output: OutputOptions


class BuildConfig(BaseModel):
    """Top level layout of config.yaml."""
    context: str = "."
    output: OutputOptions = Field(default_factory=lambda: OutputOptions(path="dist"))
    plugins: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)

    def compiler_options(self) -> CompilerOptions:
        return CompilerOptions(context=self.context, output=self.output)


class Event(BaseModel):
    """Event for build lifecycle logging."""
    ts: float
    type: str
    actor: str
    payload: Dict[str, Any]
