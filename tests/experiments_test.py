import os
import tempfile
import unittest

from huffcodec.experiments import HuffmanExperiment
from huffcodec.logger import CodingLog

class TestHuffmanExperiment(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.input_file_path = os.path.join(self.temp_dir.name, "lorem.txt")
        with open(self.input_file_path, "wb") as f:
            f.write(b"Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 20)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_run(self):
        experiment = HuffmanExperiment("lorem", self.input_file_path, self.temp_dir.name)
        experiment.run()
        self.assertTrue(os.path.exists(experiment.compressed_file_path))
        self.assertTrue(experiment.integrity_preserved)
        self.assertEqual(experiment.decompressed_file_size, experiment.input_file_size)
        self.assertGreater(experiment.compression_ratio, 1.0)
        self.assertEqual(len(experiment.logger.get_logs(CodingLog)), experiment.input_file_size)
        self.assertIn("integrity preserved", experiment.summary())

    def test_missing_input(self):
        with self.assertRaises(FileNotFoundError):
            HuffmanExperiment("missing", os.path.join(self.temp_dir.name, "missing.txt"), self.temp_dir.name)

if __name__ == '__main__':
    unittest.main()
