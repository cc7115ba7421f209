import pytest

from prompt_optimizer.preprocessing import OptimizerConfig, PromptOptimizer
from prompt_optimizer.tools import build_registry


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME and the config env vars at a throwaway directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("PROMPT_OPTIMIZER_CONFIG", raising=False)
    monkeypatch.delenv("PROMPT_OPTIMIZER_FRAMEWORK_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def optimizer():
    return PromptOptimizer(OptimizerConfig())


@pytest.fixture
def registry(optimizer):
    return build_registry(optimizer)
