"""Report generation pipeline."""

from src.pipeline.report_pipeline import ReportBundle, ReportPipeline

__all__ = ["ReportBundle", "ReportPipeline"]
