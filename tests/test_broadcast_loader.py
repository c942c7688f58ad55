import tempfile
import unittest
from pathlib import Path

from skirmish.domain import StatKey
from skirmish.infrastructure import BroadcastTarget, load_broadcast_targets


def _write_yaml(path: Path, content: str):
    path.write_text(content, encoding="utf-8")


class LoadBroadcastTargetsTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.base = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_missing_file_disables_broadcast(self):
        self.assertEqual(load_broadcast_targets(str(self.base / "missing.yaml")), [])

    def test_empty_file_has_no_targets(self):
        path = self.base / "empty.yaml"
        _write_yaml(path, "")
        self.assertEqual(load_broadcast_targets(str(path)), [])

    def test_invalid_structure_raises(self):
        path = self.base / "bad.yaml"
        _write_yaml(path, "[]")
        with self.assertRaisesRegex(RuntimeError, "Invalid broadcast targets format"):
            load_broadcast_targets(str(path))

    def test_unknown_stat_raises(self):
        path = self.base / "stat.yaml"
        _write_yaml(
            path,
            """
targets:
  - chat_id: -100
    stat: deaths
""",
        )
        with self.assertRaisesRegex(RuntimeError, "Invalid broadcast target"):
            load_broadcast_targets(str(path))

    def test_missing_chat_raises(self):
        path = self.base / "chat.yaml"
        _write_yaml(
            path,
            """
targets:
  - stat: rating
""",
        )
        with self.assertRaisesRegex(RuntimeError, "Invalid broadcast target"):
            load_broadcast_targets(str(path))

    def test_loads_targets(self):
        path = self.base / "broadcast.yaml"
        _write_yaml(
            path,
            """
targets:
  - chat_id: -1001234
    stat: sr
  - chat_id: " -1005678 "
    stat: kills
    season: " s1 "
""",
        )

        targets = load_broadcast_targets(str(path))

        self.assertEqual(
            targets,
            [
                BroadcastTarget(destination="-1001234", stat=StatKey.RATING),
                BroadcastTarget(destination="-1005678", stat=StatKey.TOTAL_KILLS, season_id="s1"),
            ],
        )
