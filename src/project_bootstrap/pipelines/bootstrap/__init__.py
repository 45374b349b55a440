"""Project bootstrap pipeline."""

from project_bootstrap.pipelines.bootstrap.pipeline import BootstrapPipeline

__all__ = ["BootstrapPipeline"]
