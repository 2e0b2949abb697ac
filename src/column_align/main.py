"""
Main entry point for column-align.

This module wires configuration, input and output streams to the Aligner
and provides a programmatic API for aligning text.
"""

import io
import sys
import time
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO

from column_align.config import Config, create_default_config
from column_align.core.aligner import Aligner
from column_align.exceptions import AlignError
from column_align.logging_config import get_logger

logger = get_logger("main")


@dataclass
class AlignmentResult:
    """Result of running the alignment pipeline."""
    success: bool
    lines_read: int = 0
    lines_written: int = 0
    column_widths: Dict[int, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    processing_time: float = 0.0


class AlignmentPipeline:
    """
    Runs one alignment from configuration to written output.

    Usage:
        pipeline = AlignmentPipeline(config)
        result = pipeline.run()
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the pipeline.

        Args:
            config: Configuration object (uses defaults if not provided)
        """
        self.config = config or create_default_config()
        self.aligner: Optional[Aligner] = None

    def build_aligner(self, source: Iterable[str], sink: TextIO) -> Aligner:
        """Create an Aligner configured from self.config."""
        config = self.config
        aligner = Aligner(source, sink, config.separator, config.text_qualifier())
        if config.output_separator is not None:
            aligner.output_separator(config.output_separator)
        aligner.update_padding(config.padding_options())
        aligner.filter_columns(config.columns)
        return aligner

    def run(
        self,
        source: Optional[Iterable[str]] = None,
        sink: Optional[TextIO] = None,
    ) -> AlignmentResult:
        """
        Run the alignment.

        Streams passed in take precedence over the configured files;
        without either, stdin and stdout are used.

        Args:
            source: Input lines
            sink: Output stream

        Returns:
            AlignmentResult with all details
        """
        start_time = time.time()
        result = AlignmentResult(success=True)

        config_errors = self.config.validate()
        if config_errors:
            result.success = False
            result.errors.extend(config_errors)
            return result

        try:
            self._run(source, sink)
        except (AlignError, OSError, UnicodeError) as e:
            logger.error("Alignment failed: %s", e)
            result.success = False
            result.errors.append(str(e))

        if self.aligner is not None:
            result.lines_read = len(self.aligner.lines)
            result.lines_written = self.aligner.lines_written
            result.column_widths = self.aligner.widths.as_dict()
        result.processing_time = time.time() - start_time
        return result

    def _run(self, source: Optional[Iterable[str]], sink: Optional[TextIO]) -> None:
        config = self.config
        in_file = out_file = None
        try:
            if source is None:
                if config.input_file:
                    in_file = open(config.input_file, "r", encoding=config.encoding, newline="\n")
                    source = in_file
                else:
                    source = sys.stdin

            self.aligner = self.build_aligner(source, io.StringIO())
            self.aligner.measure()
            logger.info(
                "Read %d lines with %d columns",
                len(self.aligner.lines),
                len(self.aligner.widths),
            )

            # Output is opened only after the input is fully read, so the
            # same path can be used for both.
            if sink is None:
                if config.output_file:
                    out_file = open(config.output_file, "w", encoding=config.encoding, newline="")
                    sink = out_file
                else:
                    sink = sys.stdout

            self.aligner.sink = sink
            self.aligner.render()
        finally:
            if in_file is not None:
                in_file.close()
            if out_file is not None:
                out_file.close()


def align_lines(lines: Iterable[str], config: Optional[Config] = None, **options) -> List[str]:
    """
    Align lines and return the aligned lines without terminators.

    Args:
        lines: Input lines
        config: Base configuration
        **options: Config fields overriding config, e.g. separator="|"

    Returns:
        The aligned lines

    Raises:
        ConfigError: If the configuration is invalid
    """
    text = align_text_lines(lines, config, **options)
    return text.split("\n")[:-1]


def align_text(text: str, config: Optional[Config] = None, **options) -> str:
    """
    Align a block of text.

    Args:
        text: Input text; one record per line
        config: Base configuration
        **options: Config fields overriding config, e.g. separator="|"

    Returns:
        The aligned text, every line terminated by a newline

    Raises:
        ConfigError: If the configuration is invalid
    """
    return align_text_lines(io.StringIO(text), config, **options)


def align_text_lines(lines: Iterable[str], config: Optional[Config] = None, **options) -> str:
    """Align lines and return the output as a single string."""
    config = config or create_default_config()
    if options:
        data = config.to_dict()
        data.update(options)
        config = Config.from_dict(data)
    config.check()

    out = io.StringIO()
    aligner = AlignmentPipeline(config).build_aligner(lines, out)
    aligner.align()
    return out.getvalue()


def align_file(
    input_file: Path,
    output_file: Optional[Path] = None,
    config: Optional[Config] = None,
) -> AlignmentResult:
    """
    Align a file.

    Args:
        input_file: File to align
        output_file: Where to write the result (None writes stdout)
        config: Configuration object (uses defaults if not provided)

    Returns:
        AlignmentResult with all details
    """
    config = replace(
        config or create_default_config(),
        input_file=Path(input_file),
        output_file=Path(output_file) if output_file else None,
    )
    return AlignmentPipeline(config).run()
