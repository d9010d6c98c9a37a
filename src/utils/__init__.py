"""Interface selection and formatting helpers."""
