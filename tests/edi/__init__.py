"""End-to-end tests for the EDI ingestion pipeline."""
