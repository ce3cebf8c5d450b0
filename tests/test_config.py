'''Unit tests for the configuration system'''

from pathlib import Path
from unittest import mock
import os
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from behaviorable import Config, ConfigError, get_config, init_config
from behaviorable.config import ENV_CONFIG_PATH


class TestConfig(unittest.TestCase):
    '''Test defaults, file loading and runtime overrides'''

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        get_config().reset()

    def tearDown(self):
        get_config().reset()
        self.tmp.cleanup()

    def write(self, name: str, content: str) -> Path:
        path = self.dir / name
        path.write_text(content, encoding = 'utf-8')
        return path

    def test_singleton(self):
        self.assertIs(Config(), get_config())

    def test_defaults(self):
        config = get_config()
        self.assertTrue(config.native_set_priority)
        self.assertTrue(config.detach_clears_owner)
        self.assertTrue(config.reattach_moves_behavior)

    def test_load_json5(self):
        path = self.write('behaviorable.json5', '''
            {
                // keep the stale owner reference on detach
                detach_clears_owner: false,
            }
        ''')

        self.assertTrue(get_config().load_file(path))
        self.assertFalse(get_config().detach_clears_owner)
        self.assertTrue(get_config().native_set_priority)

    def test_load_yaml(self):
        path = self.write('behaviorable.yaml', 'native_set_priority: false\n')

        self.assertTrue(get_config().load_file(path))
        self.assertFalse(get_config().native_set_priority)

    def test_empty_yaml(self):
        path = self.write('empty.yml', '')
        self.assertTrue(get_config().load_file(path))

    def test_missing_file(self):
        missing = self.dir / 'missing.json5'
        self.assertFalse(get_config().load_file(missing))

        with self.assertRaises(ConfigError):
            get_config().load_file(missing, strict = True)

    def test_invalid_file(self):
        path = self.write('broken.json5', '{ native_set_priority: ')

        with self.assertLogs('behaviorable.config', level = 'WARNING'):
            self.assertFalse(get_config().load_file(path))

        with self.assertRaises(ConfigError):
            get_config().load_file(path, strict = True)

    def test_unknown_option(self):
        path = self.write('unknown.yaml', 'colour: blue\n')

        with self.assertRaises(ConfigError) as ctx:
            get_config().load_file(path, strict = True)
        self.assertIn('colour', str(ctx.exception))

    def test_non_mapping(self):
        path = self.write('list.yaml', '- a\n- b\n')
        with self.assertRaises(ConfigError):
            get_config().load_file(path, strict = True)

    def test_set_and_reset(self):
        config = get_config()
        config.set('reattach_moves_behavior', False)
        self.assertFalse(config.reattach_moves_behavior)

        config.reset()
        self.assertTrue(config.reattach_moves_behavior)

    def test_set_unknown_option(self):
        with self.assertRaises(ConfigError):
            get_config().set('colour', 'blue')

    def test_get_default(self):
        self.assertEqual(get_config().get('colour', 'none'), 'none')

    def test_init_config_from_environment(self):
        env_path = self.write('env.json5', '{native_set_priority: false}')
        file_path = self.write('file.yaml', 'detach_clears_owner: false\n')

        with mock.patch.dict(os.environ, {ENV_CONFIG_PATH: str(env_path)}):
            init_config(file_path)

        config = get_config()
        self.assertFalse(config.native_set_priority)
        self.assertFalse(config.detach_clears_owner)
        self.assertTrue(config.reattach_moves_behavior)


if __name__ == '__main__':
    unittest.main()
