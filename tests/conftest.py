"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def flat_record():
    """A bank record scored by flat keyword coverage."""
    return {
        "id": 1,
        "question": "Quel organe juge les litiges du travail ?\\nCitez-le.",
        "reponse": "Le conseil de prud'hommes juge les litiges individuels du travail.",
        "motsCles": ["conseil", "prud'hommes", "litiges", "individuels"],
    }


@pytest.fixture
def weighted_record():
    """A bank record with essential/secondary keywords and a grave-error rule."""
    return {
        "id": "q-2",
        "question": "Qui contrôle l'application du droit du travail ?",
        "reponse": "L'inspection du travail, service déconcentré du ministère du travail.",
        "motsClesEssentiels": ["inspection", "travail"],
        "motsClesSecondaires": ["ministère", "déconcentré", "agents de contrôle"],
        "erreursGraves": [{"detect": ["préfet"], "penalty": 0.5}],
    }


@pytest.fixture
def sample_bank(flat_record, weighted_record):
    """A bank document as produced by the preparation step."""
    return {
        "questions": [
            flat_record,
            weighted_record,
            {
                "id": 3,
                "question": "Qu'est-ce qu'un contrat à durée déterminée ?",
                "reponse": "Un contrat conclu pour une durée limitée, pour un motif précis.",
            },
        ]
    }


@pytest.fixture
def bank_file(tmp_path, sample_bank):
    """The sample bank written to a temporary JSON file."""
    path = tmp_path / "questions_keywords.json"
    path.write_text(json.dumps(sample_bank, ensure_ascii=False), encoding="utf-8")
    return path
