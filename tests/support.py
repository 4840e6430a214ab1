import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

CLEAN_ENV = {"TERRA_BASES_HISTORY": "", "TERRA_BASES_HISTORY_PATH": ""}


class IsolatedConfigTestCase(unittest.TestCase):
    """Keep decode failures away from the user's real config and history."""

    def setUp(self) -> None:
        super().setUp()
        tmpdir = TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        self.config_dir = Path(tmpdir.name)
        env_patch = mock.patch.dict(os.environ, CLEAN_ENV)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        config_patch = mock.patch("terra_bases.config.CONFIG_PATH", self.config_dir / "bases.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)
