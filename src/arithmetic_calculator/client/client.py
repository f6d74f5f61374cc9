"""HTTP client for the /arithmetic endpoint."""
from pathlib import Path
import tarfile
import tempfile
from typing import Optional
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath, IPvAnyAddress
import requests

from arithmetic_calculator.common.errors import ArithmeticClientError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import SYMBOL_TO_OPERATION, Operation, evaluate_symbol


class ArithmeticClient(BaseModel):
    """
    HTTP client responsible for sending arithmetic operations to the server and receiving computed results.

    The HTTP client:
    - sends one ``GET /arithmetic`` request per operation
    - can serve as the evaluator of an :class:`~arithmetic_calculator.client.state.InputTracker`
    - runs batches of operations read from a plain text file or an archive
    """

    # Make the Pydantic instance immutable (read-only), to prevent errors
    # that could be caused by changes to the network configuration during execution.
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=9000, ge=1, le=65535, description="Server TCP port")
    timeout: float = Field(default=5.0, gt=0, description="Request timeout in seconds")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def compute(self, operation: str, operand1: str, operand2: str) -> Optional[float]:
        """
        Ask the server to perform one operation.

        :param str operation: add | subtract | multiply | divide
        :param str operand1: Left operand as a numeric string
        :param str operand2: Right operand as a numeric string

        :return: Result, or None for division by zero
        :rtype: Optional[float]
        :raises ArithmeticClientError: If the server rejects the request
        :raises requests.RequestException: On network failure
        """
        response = requests.get(
            f"{self.base_url}/arithmetic",
            params={"operation": operation, "operand1": operand1, "operand2": operand2},
            timeout=self.timeout,
        )
        if response.status_code == 400:
            raise ArithmeticClientError(400, response.json().get("error", response.text))
        response.raise_for_status()

        result = response.json()["result"]
        return None if result is None else float(result)

    def evaluate(self, symbol: str, operand1: float, operand2: float) -> Optional[float]:
        """
        Evaluator adapter for the input tracker.

        Power (``^``) is not offered by the endpoint and is computed locally.
        """
        operation: Optional[Operation] = SYMBOL_TO_OPERATION.get(symbol)
        if operation is None:
            return evaluate_symbol(symbol, operand1, operand2)
        return self.compute(operation.value, repr(operand1), repr(operand2))

    def send_file(self,
        input_file: FilePath,
        output_file: Path,
    ) -> None:
        """
        Send every operation of an input file to the server and write the results to an output file.

        Each non-empty input line holds ``<operation> <operand1> <operand2>``.
        Output lines read ``<line> = <result>`` or ``<line> -> ERROR: <message>``.

        :param FilePath input_file: Path to the input file or archive
        :param Path output_file: Path where results will be written

        :return: None
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        if input_file.suffix == ".txt":
            content = input_file.read_text()
        else:
            content = self._extract_archive(input_file)

        lines = [line.strip() for line in content.splitlines() if line.strip()]
        logger.info(f"✉️ Sending {len(lines)} operations to {self.base_url}")

        with output_file.open("w", encoding="utf-8") as f_out:
            for line in lines:
                f_out.write(self._run_line(line) + "\n")
                # Keep progress on disk if the run is interrupted
                f_out.flush()

    def _run_line(self, line: str) -> str:
        tokens = line.split()
        if len(tokens) != 3:
            return f"{line} -> ERROR: expected '<operation> <operand1> <operand2>'"
        try:
            result = self.compute(*tokens)
        except ArithmeticClientError as exc:
            logger.error(f"🧮❌ Server rejected {line!r}: {exc.message}")
            return f"{line} -> ERROR: {exc.message}"
        return f"{line} = {result}"

    def _extract_archive(self, archive_path: FilePath) -> str:
        """
        Extract the first .txt file found in a supported archive and return its content as a string.

        Supported formats:
        - .zip
        - .tar.xz
        - .7z

        :param FilePath archive_path: Path to the archive file

        :return: Content of the extracted .txt file
        :rtype: str
        :raises ValueError: If no .txt file is found or format is unsupported
        """
        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)

            if archive_path.suffix == ".zip":
                with zipfile.ZipFile(archive_path, "r") as zf:
                    name = self._first_txt(zf.namelist(), "zip")
                    zf.extract(name, path=tmpdir_path)

            elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
                with tarfile.open(archive_path, "r:xz") as tf:
                    name = self._first_txt(tf.getnames(), "tar.xz")
                    tf.extract(name, path=tmpdir_path, filter="data")

            elif archive_path.suffix == ".7z":
                with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                    name = self._first_txt(archive.getnames(), "7z")
                    archive.extract(path=tmpdir_path, targets=[name])

            else:
                raise ValueError(f"📄❌ Unsupported archive format: {archive_path.suffix}")

            return (tmpdir_path / name).read_text()

    @staticmethod
    def _first_txt(names: list[str], kind: str) -> str:
        txt_files = [name for name in names if name.endswith(".txt")]
        if not txt_files:
            raise ValueError(f"📄❌ No .txt file found in {kind} archive")
        return txt_files[0]
