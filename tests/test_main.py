import contextlib
import io
import logging
import os
import tempfile
import unittest

import main
from core.logging_config import LOGGER_NAMES, setup_logging


def reset_loggers():
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


class TestMain(unittest.TestCase):
    def tearDown(self):
        reset_loggers()

    def test_writes_to_stdout(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = main.main(["--width", "2", "--height", "2"])
        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "P3\n2 2\n255\n0 0 0\n0 255 0\n255 0 0\n255 255 0\n")

    def test_writes_to_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.ppm")
            status = main.main(["--width", "4", "--height", "3", "--output", path])
            self.assertEqual(status, 0)
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        self.assertEqual(lines[:3], ["P3", "4 3", "255"])
        self.assertEqual(len(lines), 3 + 12)

    def test_defaults(self):
        args = main.build_parser().parse_args([])
        self.assertEqual((args.width, args.height), (main.IMAGE_WIDTH, main.IMAGE_HEIGHT))
        self.assertIsNone(args.output)

    def test_rejects_non_positive_size(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main.main(["--width", "0"])
        self.assertEqual(ctx.exception.code, 2)


class TestLoggingConfig(unittest.TestCase):
    def tearDown(self):
        reset_loggers()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        for name in LOGGER_NAMES:
            with self.subTest(name=name):
                logger = logging.getLogger(name)
                self.assertEqual(len(logger.handlers), 1)
                self.assertEqual(logger.level, logging.DEBUG)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "render.log")
            with contextlib.redirect_stderr(io.StringIO()):
                setup_logging(logging.DEBUG, log_file=path)
                logging.getLogger("renderer.ppm").debug("hello from the writer")
            reset_loggers()
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        self.assertIn("renderer.ppm - DEBUG - hello from the writer", content)

    def test_setup_again_closes_previous_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "render.log")
            with contextlib.redirect_stderr(io.StringIO()):
                setup_logging(logging.DEBUG, log_file=path)
                file_handlers = [h for h in logging.getLogger("renderer").handlers
                                 if isinstance(h, logging.FileHandler)]
                self.assertEqual(len(file_handlers), 1)
                log_stream = file_handlers[0].stream
                setup_logging(logging.DEBUG)
            self.assertTrue(log_stream.closed)
            for name in LOGGER_NAMES:
                with self.subTest(name=name):
                    handlers = logging.getLogger(name).handlers
                    self.assertFalse(any(isinstance(h, logging.FileHandler) for h in handlers))

    def test_writer_logs_at_debug(self):
        from renderer.ppm import write_header
        with self.assertLogs("renderer", level="DEBUG") as logs:
            write_header(io.StringIO(), 2, 2)
        self.assertIn("Wrote header for 2x2 image", logs.output[0])


if __name__ == "__main__":
    unittest.main()
