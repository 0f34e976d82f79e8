import unittest

from tetris_stack.config import Config, _optional_int, config


class TestConfig(unittest.TestCase):
    def test_default_values(self):
        cfg = Config()
        self.assertGreaterEqual(cfg.QUEUE_CAPACITY, 1)
        self.assertEqual(cfg.LOG_LEVEL, cfg.LOG_LEVEL.upper())

    def test_module_instance(self):
        self.assertIsInstance(config, Config)

    def test_custom_values(self):
        cfg = Config(QUEUE_CAPACITY=7, SEED=3, LOG_LEVEL="debug")
        self.assertEqual(cfg.QUEUE_CAPACITY, 7)
        self.assertEqual(cfg.SEED, 3)
        self.assertEqual(cfg.LOG_LEVEL, "DEBUG")

    def test_post_init_rejects_zero_capacity(self):
        with self.assertRaises(ValueError):
            Config(QUEUE_CAPACITY=0)

    def test_post_init_rejects_unknown_log_level(self):
        with self.assertRaises(ValueError):
            Config(LOG_LEVEL="verbose")
        self.assertEqual(Config(LOG_LEVEL="warning").LOG_LEVEL, "WARNING")

    def test_optional_int(self):
        self.assertIsNone(_optional_int(None))
        self.assertIsNone(_optional_int("  "))
        self.assertEqual(_optional_int("12"), 12)
        with self.assertRaises(ValueError):
            _optional_int("abc")


if __name__ == "__main__":
    unittest.main()
