"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as processing progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile
        - env_check: inputSourceFile, jsonOutputFile, envOK
        - source_parse: parsedSlides
        - results_write: writtenFile
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the root markdown file
        outputdir: Directory for the JSON output
        verbosity: Logging verbosity level (1-3)
        inputFile: Root markdown filename (relative to inputdir)
        outputFile: Optional JSON filename (defaults to appsettings.output_file)
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the root markdown file
        jsonOutputFile: Resolved path of the JSON file to write
        parsedSlides: ParseResult produced by the parser
        writtenFile: Path of the JSON file actually written
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    jsonOutputFile: Path = field(default=Path("/"))
    parsedSlides: Optional[List[Any]] = field(default=None)  # ParseResult at runtime
    writtenFile: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses

        options_dict = vars(options)
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Unknown CLI options (e.g. ones added by chris_plugin) are dropped
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}
        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_parse,
            results_write,
            results_report
        )

    This is equivalent to:
        results_report(results_write(source_parse(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
