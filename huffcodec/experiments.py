#experiments.py
import os
import time
from typing import Optional

from .codecs import HuffmanCodecFile
from .logger import Logger


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path: str, experiment_root_folder_path: str, logger: Optional[Logger] = None):

        self.name = name

        #validate that input file exists and can be read
        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        #attempt to create experiment folder
        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}.huff")
        self.decompressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}_decompressed")

        self.logger = logger if logger is not None else Logger()
        self.codec = HuffmanCodecFile()


    def run(self):
        self.input_file_size = os.path.getsize(self.input_file_path)

        self.compression_start_time = time.time()
        self.codec.compress(self.input_file_path, self.compressed_file_path, self.logger)
        self.compression_end_time = time.time()

        self.decompression_start_time = time.time()
        self.codec.decompress(self.compressed_file_path, self.decompressed_file_path, self.logger)
        self.decompression_end_time = time.time()

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        self.decompressed_file_size = os.path.getsize(self.decompressed_file_path)

        self.compression_ratio = self.input_file_size / self.compressed_file_size

        with open(self.input_file_path, 'rb') as original, open(self.decompressed_file_path, 'rb') as restored:
            self.integrity_preserved = original.read() == restored.read()

    def summary(self) -> str:
        return (
            f"{self.name}: {self.input_file_size} -> {self.compressed_file_size} bytes "
            f"(ratio {self.compression_ratio:.3f}), "
            f"compression {self.compression_end_time - self.compression_start_time:.3f}s, "
            f"decompression {self.decompression_end_time - self.decompression_start_time:.3f}s, "
            f"integrity {'preserved' if self.integrity_preserved else 'compromised'}"
        )
