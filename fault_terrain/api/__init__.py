"""HTTP interface for fault terrain generation."""
