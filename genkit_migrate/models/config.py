"""
Configuration models for genkit-migrate.

This module defines Pydantic models for the per-stage pipeline settings
and for the persisted tool configuration.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, ConfigDict


DEFAULT_EXCLUDE_DIRS = [
    ".git", ".hg", ".svn", "vendor", ".venv", "venv",
    "__pycache__", "node_modules", "site-packages",
]


def _normalize_provider(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    return value.strip().lower()


class AnalyzerConfig(BaseModel):
    """Settings for the walker, extractor and project aggregator."""
    model_config = ConfigDict(validate_assignment=True)
    
    source_provider: str = "gcp"
    target_provider: str = ""
    verbose: bool = Field(
        default=False,
        description="Skip unparsable files and unreadable directories with a warning"
    )
    exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    
    @field_validator('source_provider', 'target_provider')
    @classmethod
    def normalize_provider(cls, v):
        return _normalize_provider(v)


class TransformerConfig(BaseModel):
    """Settings for the rewrite planner."""
    source_provider: str = "gcp"
    target_provider: str = "aws"
    target_path: Optional[str] = None
    dry_run: bool = False
    region: str = "us-east-1"
    
    @field_validator('source_provider', 'target_provider')
    @classmethod
    def normalize_provider(cls, v):
        return _normalize_provider(v)


class GeneratorConfig(BaseModel):
    """Settings for writing a migration to disk."""
    target_provider: str = "aws"
    output_path: str = Field(..., description="Directory the migrated project is written to")
    overwrite: bool = False
    exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    
    @field_validator('target_provider')
    @classmethod
    def normalize_provider(cls, v):
        return _normalize_provider(v)


class AWSSettings(BaseModel):
    """AWS account settings."""
    region: str = "us-east-1"
    profile: str = "default"


class GCPSettings(BaseModel):
    """Google Cloud settings."""
    project_id: Optional[str] = None
    region: str = "us-central1"


class AzureSettings(BaseModel):
    """Azure settings."""
    subscription_id: Optional[str] = None
    resource_group: Optional[str] = None
    location: Optional[str] = None


class ProviderSettings(BaseModel):
    """Per-provider settings block."""
    aws: Optional[AWSSettings] = None
    gcp: Optional[GCPSettings] = None
    azure: Optional[AzureSettings] = None


class ToolConfig(BaseModel):
    """Persisted defaults for the command line tool."""
    default_source_provider: str = "gcp"
    default_target_provider: str = "aws"
    interactive: bool = True
    providers: Dict[str, ProviderSettings] = Field(
        default_factory=lambda: {
            "aws": ProviderSettings(aws=AWSSettings()),
            "gcp": ProviderSettings(gcp=GCPSettings()),
        }
    )
    
    @field_validator('default_source_provider', 'default_target_provider')
    @classmethod
    def normalize_provider(cls, v):
        return _normalize_provider(v)
    
    def aws_settings(self) -> AWSSettings:
        """Return the AWS settings, falling back to defaults."""
        provider = self.providers.get("aws")
        if provider and provider.aws:
            return provider.aws
        return AWSSettings()
    
    def gcp_settings(self) -> GCPSettings:
        """Return the GCP settings, falling back to defaults."""
        provider = self.providers.get("gcp")
        if provider and provider.gcp:
            return provider.gcp
        return GCPSettings()
