"""
Test aggiuntivi per Config: precedenza CLI>YAML>default, deep-merge e casi bordo.
"""
import tempfile
import os
import unittest
import yaml

from dialog_extractor.config import Config


class TestConfigEdge(unittest.TestCase):
    """Casi bordo su caricamento e merge configurazione"""

    def _write_yaml(self, data):
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            yaml.safe_dump(data, f)
            return f.name

    def test_update_from_args_does_not_override_with_none(self):
        path = self._write_yaml({'threshold': 2.0, 'skip': '1'})
        try:
            cfg = Config(path)
            # Applica args dove uno è None → non deve sovrascrivere
            cfg.update_from_args({'threshold': None, 'skip': '0,1'})
            self.assertEqual(cfg.get('threshold'), 2.0)
            self.assertEqual(cfg.get('skip'), '0,1')
        finally:
            os.unlink(path)

    def test_deep_merge_logging_partial_override(self):
        path = self._write_yaml({'logging': {'file': 'run.log'}})
        try:
            cfg = Config(path)
            # level rimane dai default
            self.assertEqual(cfg.get('logging'), {'level': 'INFO', 'file': 'run.log'})
        finally:
            os.unlink(path)

    def test_nested_args_skip_none_values(self):
        path = self._write_yaml({'logging': {'level': 'WARNING', 'file': 'run.log'}})
        try:
            cfg = Config(path)
            cfg.update_from_args({'logging': {'level': 'DEBUG', 'file': None}})
            self.assertEqual(cfg.get('logging'), {'level': 'DEBUG', 'file': 'run.log'})
        finally:
            os.unlink(path)

    def test_unknown_keys_are_preserved(self):
        path = self._write_yaml({'unknown_key': 123})
        try:
            cfg = Config(path)
            self.assertEqual(cfg.get('unknown_key'), 123)
        finally:
            os.unlink(path)

    def test_yaml_crlf_and_null_values(self):
        # Contenuto con CRLF e valori nulli
        content = 'threshold: 0.5\r\nskip: null\r\n'
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            f.write(content)
            path = f.name
        try:
            cfg = Config(path)
            self.assertEqual(cfg.get('threshold'), 0.5)
            # Valore null rimane None e non rompe i default
            self.assertIsNone(cfg.get('skip'))
            self.assertEqual(cfg.get('fragment_extension'), 'mp3')
        finally:
            os.unlink(path)


if __name__ == '__main__':
    unittest.main()
