"""Pipeline orchestration for the Curatorator report."""

from curatorator.pipeline.report_pipeline import ReportPipeline

__all__ = ["ReportPipeline"]
