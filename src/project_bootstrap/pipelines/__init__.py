"""Processing pipelines for the project bootstrapper."""

from project_bootstrap.pipelines.bootstrap import BootstrapPipeline

__all__ = ["BootstrapPipeline"]
