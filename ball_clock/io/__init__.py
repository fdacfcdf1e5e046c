"""Parquet schemas and output path helpers."""
