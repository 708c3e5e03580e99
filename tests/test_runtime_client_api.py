import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from tenseflow.runtime import AnalyzerError, client_api


def _run(argv, env=None):
    with patch.dict("os.environ", env or {}, clear=True), patch("sys.argv", ["client_api", *argv]):
        buf = io.StringIO()
        with redirect_stdout(buf):
            client_api.main()
    return json.loads(buf.getvalue())


class RuntimeClientAPITests(unittest.TestCase):
    def test_example_command_is_seedable(self):
        first = _run(["--seed", "4", "example"])
        second = _run(["--seed", "4", "example"])
        self.assertEqual(first, second)
        self.assertEqual(first["reference_version"], "extended")
        self.assertIn("sentence", first["items"][0]["example"])

    def test_batch_command(self):
        batch = _run(["--seed", "1", "batch", "--size", "3"], env={"TENSEFLOW_EXTRA_ATTRIBUTES": "1"})
        self.assertEqual(len(batch), 3)
        self.assertTrue(all("aspect" in ex for ex in batch))

    def test_normalize_command(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "response.json"
            path.write_text(json.dumps({"sentence": "C", "tense": "Future Simple", "tags": []}), encoding="utf-8")
            out = _run(["normalize", "--input-json", str(path)])
        self.assertEqual(out["shape"], "single")
        self.assertEqual(out["examples"][0]["sentence"], "C")

    def test_analyze_command_reports_failure(self):
        with patch("tenseflow.runtime.analyzer.AnalyzerClient.analyze") as analyze:
            analyze.side_effect = AnalyzerError("HTTP 503")
            out = _run(["analyze", "--sentence", "She reads."])
        self.assertTrue(out["fallback"])
        self.assertEqual(out["feedback"]["severity"], "error")
        self.assertEqual(out["items"][0]["example"]["tense"], "Present Perfect Continuous")

    def test_reference_and_config_commands(self):
        ref = _run(["reference"], env={"TENSEFLOW_REFERENCE_VERSION": "basic"})
        self.assertEqual(ref["version"], "basic")
        self.assertIn("VBZ", ref["tags"])
        cfg = _run(["config"], env={"TENSEFLOW_TEMPLATE_SET": "v1"})
        self.assertEqual(cfg["template_set"], "v1")


if __name__ == "__main__":
    unittest.main()
