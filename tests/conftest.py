"""
Shared pytest fixtures for the EDI ingestion test suite.

This module provides common fixtures used across test modules:
- Sample interchange text (valid 850, header-less, malformed)
- Pipeline instances
- Temporary EDI files

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings
from src.config._loader import clear_config_cache
from src.edi.pipeline import EdiIngestionPipeline, PipelineConfig


VALID_ISA = (
    "ISA*00*          *00*          *ZZ*SENDERID       *ZZ*RECEIVERID     "
    "*240101*1253*U*00401*000000001*0*P*>~"
)


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def configs_dir() -> Path:
    """Return the configs directory path."""
    return settings.paths.configs_dir


# ===========================
# Sample Interchange Fixtures
# ===========================

@pytest.fixture(scope="session")
def valid_isa_line() -> str:
    """ISA segment with exactly 16 elements."""
    return VALID_ISA


@pytest.fixture(scope="session")
def valid_850_text() -> str:
    """
    Complete, well-formed purchase order interchange.

    One segment per line, '~' terminators, SE01 matching its transaction.
    """
    return "\n".join([
        VALID_ISA,
        "GS*PO*SENDERID*RECEIVERID*20240101*1253*1*X*004010~",
        "ST*850*0001~",
        "BEG*00*SA*PO12345**20240101~",
        "DTM*002*20240115~",
        "PO1*1*10*EA*9.99**VP*ITEM001~",
        "CTT*1~",
        "SE*6*0001~",
        "GE*1*1~",
        "IEA*1*000000001~",
    ]) + "\n"


@pytest.fixture(scope="session")
def headerless_850_text() -> str:
    """Transaction header only: no ISA, no GS."""
    return "ST~850~0001"


# ===========================
# Pipeline Fixtures
# ===========================

@pytest.fixture
def pipeline() -> EdiIngestionPipeline:
    """Pipeline with default (non-strict) rules."""
    return EdiIngestionPipeline(PipelineConfig(strict_envelope=False))


@pytest.fixture
def strict_pipeline() -> EdiIngestionPipeline:
    """Pipeline with envelope balance / nesting / count rules enabled."""
    return EdiIngestionPipeline(PipelineConfig(strict_envelope=True))


@pytest.fixture
def fresh_config_cache():
    """Clear the YAML cache before and after a test that alters config files."""
    clear_config_cache()
    yield
    clear_config_cache()


# ===========================
# Temporary File Fixtures
# ===========================

@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """
    Create a temporary output directory for test artifacts.

    Args:
        tmp_path: pytest built-in fixture for temp directory

    Returns:
        Path to temp output directory
    """
    output_dir = tmp_path / "test_output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


@pytest.fixture
def temp_edi_file(tmp_path: Path, valid_850_text: str) -> Path:
    """
    Create a temporary .edi file holding the valid 850 interchange.

    Args:
        tmp_path: pytest built-in fixture
        valid_850_text: Sample interchange fixture

    Returns:
        Path to temporary EDI file
    """
    edi_file = tmp_path / "po_850.edi"
    edi_file.write_text(valid_850_text, encoding="utf-8")
    return edi_file


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end pipeline scenarios")
