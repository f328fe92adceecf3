"""Analysis writer for saving pipeline results as JSON."""

import json
from pathlib import Path

from polyhive.domain import PolygonAnalysis
from polyhive.exceptions import AnalysisSaveError


class AnalysisWriter:
    """Writes a PolygonAnalysis to a JSON file.

    Example:
        writer = AnalysisWriter(Path("shape-analysis.json"))
        writer.write(analysis)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the analysis writer.

        Args:
            output_path: Path where the JSON result will be written
        """
        self._output_path = output_path

    def write(self, analysis: PolygonAnalysis) -> Path:
        """Serialize an analysis to the output path.

        Args:
            analysis: Result of the pipeline

        Returns:
            Path written to

        Raises:
            AnalysisSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(
                json.dumps(analysis.to_dict(), indent=2),
                encoding="utf-8",
            )
        except OSError as e:
            raise AnalysisSaveError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_default_output_path(input_path: Path) -> Path:
        """Generate the default output path for an input polygon file.

        Args:
            input_path: Path to the polygon file

        Returns:
            Path with '-analysis.json' replacing the extension

        Examples:
            >>> AnalysisWriter.get_default_output_path(Path("shape.json"))
            PosixPath('shape-analysis.json')
        """
        return input_path.parent / f"{input_path.stem}-analysis.json"
