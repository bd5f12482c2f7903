"""
Tests for the game configuration and its command line options.
"""

from argparse import ArgumentParser
from unittest import TestCase, main

from grid2048.config import GameConfig, add_arguments
from grid2048.core.spawn import DOUBLE


class TestGameConfig(TestCase):
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Defaults describe the classic game."""
        config = GameConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.spawn_policy.name, 'classic')
        self.assertEqual(config.target, 2048)
        self.assertIsNone(config.seed)

    def test_invalid_values(self):
        """Invalid parameters are refused at construction."""
        with self.assertRaises(ValueError):
            GameConfig(size=1)
        with self.assertRaises(ValueError):
            GameConfig(target=1000)
        with self.assertRaises(ValueError):
            GameConfig(policy='triple')
        with self.assertRaises(ValueError):
            GameConfig(log_level='LOUD')

    def test_from_namespace(self):
        """Parsed options build a configuration."""
        parser = add_arguments(ArgumentParser())
        args = parser.parse_args(['--size', '6', '--policy', 'double', '--seed', '3', '--log-level', 'debug'])
        config = GameConfig.from_namespace(args)

        self.assertEqual(config.size, 6)
        self.assertIs(config.spawn_policy, DOUBLE)
        self.assertEqual(config.seed, 3)
        self.assertEqual(config.log_level, 'DEBUG')

    def test_parser_defaults(self):
        """Parser defaults match the configuration defaults."""
        args = add_arguments(ArgumentParser()).parse_args([])
        self.assertEqual(GameConfig.from_namespace(args), GameConfig())

    def test_unknown_policy_option(self):
        """The parser only offers the built-in policies."""
        parser = add_arguments(ArgumentParser())
        with self.assertRaises(SystemExit):
            parser.parse_args(['--policy', 'triple'])


if __name__ == '__main__':
    main()
