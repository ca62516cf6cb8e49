import importlib.util
import os

import pytest


SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts")


def load_script(name: str):
    """Import a module from the scripts/ directory."""
    spec = importlib.util.spec_from_file_location(name, os.path.join(SCRIPTS_DIR, f"{name}.py"))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="session")
def verify_script():
    return load_script("verify_signature_script")


@pytest.fixture(scope="session")
def keypair_script():
    return load_script("gen_signing_keypair")
