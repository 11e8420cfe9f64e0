"""Package-level checks."""

import importlib
import pkgutil

import pytest

import conllukit

MODULE_NAMES = sorted(
    f"conllukit.{info.name}" for info in pkgutil.iter_modules(conllukit.__path__)
)


@pytest.mark.parametrize("module_name", MODULE_NAMES)
def test_modules_are_documented(module_name):
    module = importlib.import_module(module_name)
    assert module.__doc__ and module.__doc__.strip()


def test_public_exports():
    for name in conllukit.__all__:
        assert hasattr(conllukit, name)
