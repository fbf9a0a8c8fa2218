"""
Batch help generation.

Fans a collection of commands out across a small pool of asyncio workers.
Each command is converted and written on its own, so one malformed command
is reported and skipped without affecting the rest of the batch.

Markdown: one page per command (plus an optional module page).
MAML: every command is converted independently, then the successful trees
are written together as one help file.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from cmdhelp.config import Settings
from cmdhelp.exceptions import OutputPathError
from cmdhelp.maml.converter import convert_command_help
from cmdhelp.maml.schemas import Command, HelpItems
from cmdhelp.maml.serializer import write_to_file
from cmdhelp.markdown import CommandHelpMarkdownWriter, CommandHelpWriterSettings, ModulePageWriter
from cmdhelp.metadata import command_help_base_metadata, merge_metadata, module_page_metadata
from cmdhelp.schemas import CommandHelp

logger = logging.getLogger(__name__)

console = Console()


@dataclass
class ConversionResult:
    """Outcome of one command's conversion."""
    title: str
    status: str  # "written", "converted", "skipped" or "failed"
    path: Optional[Path] = None
    error: Optional[str] = None
    command: Optional[Command] = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.status != "failed"


@dataclass
class BatchSummary:
    """All results of a batch plus any file written for the whole batch."""
    results: List[ConversionResult]
    files: List[Path] = field(default_factory=list)

    @property
    def failed(self) -> List[ConversionResult]:
        return [r for r in self.results if r.status == "failed"]

    @property
    def written(self) -> List[ConversionResult]:
        return [r for r in self.results if r.status == "written"]


def prepare_output_folder(folder: Path) -> Path:
    """
    Resolve and create the output folder.

    Raises:
        OutputPathError: if the path exists and is a file
    """
    folder = Path(folder).resolve()
    if folder.exists() and not folder.is_dir():
        raise OutputPathError(folder)
    folder.mkdir(parents=True, exist_ok=True)
    return folder


class HelpGenerationPipeline:
    """Converts and writes help for a batch of commands."""

    def __init__(
        self,
        commands: Sequence[CommandHelp],
        settings: Settings,
        metadata: Optional[Mapping[str, Any]] = None,
        show_progress: bool = True
    ):
        """
        Initialize the pipeline.

        Args:
            commands: Help Models in output order
            settings: Encoding, output folder, worker count, ...
            metadata: Extra front matter keys for markdown pages
            show_progress: Render a rich progress bar
        """
        self.commands = list(commands)
        self.settings = settings
        self.metadata = dict(metadata or {})
        self.show_progress = show_progress

    # ------------------------------------------------------------------
    # Per-command units of work
    # ------------------------------------------------------------------

    def _write_markdown_page(self, command_help: CommandHelp, folder: Path) -> ConversionResult:
        path = folder / f"{command_help.title}.md"
        if path.exists() and not self.settings.force:
            logger.info(f"Skipping {command_help.title}: {path.name} exists (use --force to overwrite)")
            return ConversionResult(command_help.title, "skipped", path=path)

        metadata = merge_metadata(self.metadata, command_help_base_metadata(command_help))
        writer = CommandHelpMarkdownWriter(CommandHelpWriterSettings(self.settings.encoding, path))
        return ConversionResult(command_help.title, "written", path=writer.write(command_help, metadata))

    def _convert_to_maml(self, command_help: CommandHelp) -> ConversionResult:
        command = convert_command_help(command_help)
        return ConversionResult(command_help.title, "converted", command=command)

    # ------------------------------------------------------------------
    # Worker pool
    # ------------------------------------------------------------------

    async def _worker(
        self,
        worker_id: int,
        queue: asyncio.Queue,
        task: Callable[[CommandHelp], ConversionResult],
        results: Dict[int, ConversionResult],
        advance: Callable[[], None]
    ) -> None:
        while True:
            try:
                index, command_help = queue.get_nowait()
            except asyncio.QueueEmpty:
                break

            try:
                results[index] = await asyncio.to_thread(task, command_help)
            except Exception as e:
                logger.exception(f"Worker {worker_id}: failed {command_help.title}")
                results[index] = ConversionResult(command_help.title, "failed", error=str(e))
            finally:
                advance()
                queue.task_done()

    async def _run_all(
        self,
        task: Callable[[CommandHelp], ConversionResult],
        description: str
    ) -> List[ConversionResult]:
        queue: asyncio.Queue = asyncio.Queue()
        for index, command_help in enumerate(self.commands):
            queue.put_nowait((index, command_help))

        results: Dict[int, ConversionResult] = {}
        num_workers = min(self.settings.num_workers, max(len(self.commands), 1))

        if self.show_progress:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console,
                transient=True,
            ) as progress:
                overall = progress.add_task(description, total=len(self.commands))
                await asyncio.gather(*[
                    self._worker(i, queue, task, results, lambda: progress.update(overall, advance=1))
                    for i in range(num_workers)
                ])
        else:
            await asyncio.gather(*[
                self._worker(i, queue, task, results, lambda: None)
                for i in range(num_workers)
            ])

        return [results[i] for i in range(len(self.commands))]

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def generate_markdown(self, module_page_path: Optional[Path] = None) -> BatchSummary:
        """
        Write one markdown page per command.

        Args:
            module_page_path: Module page file or folder (default: output folder)

        Returns:
            BatchSummary
        """
        folder = prepare_output_folder(self.settings.output_folder)
        logger.info(f"Writing markdown help for {len(self.commands)} command(s) to {folder}")

        results = await self._run_all(
            lambda c: self._write_markdown_page(c, folder),
            f"[cyan]Writing {len(self.commands)} markdown pages"
        )
        summary = BatchSummary(results)

        if self.settings.with_module_page and self.commands:
            first = self.commands[0]
            page_settings = CommandHelpWriterSettings(
                self.settings.encoding,
                Path(module_page_path) if module_page_path else folder
            )
            metadata = module_page_metadata(
                first.module_name,
                locale=self.settings.locale,
                help_version=self.settings.help_version,
                help_info_uri=self.settings.help_info_uri
            )
            summary.files.append(ModulePageWriter(page_settings).write(self.commands, metadata))

        return summary

    async def generate_maml(self, file_name: Optional[str] = None) -> BatchSummary:
        """
        Convert every command and write the successful ones as one MAML file.

        Args:
            file_name: Output file name (default: '<Module>-help.xml')

        Returns:
            BatchSummary
        """
        folder = prepare_output_folder(self.settings.output_folder)
        results = await self._run_all(
            self._convert_to_maml,
            f"[cyan]Converting {len(self.commands)} commands to MAML"
        )
        summary = BatchSummary(results)

        converted = [r for r in results if r.command is not None]
        if not converted:
            logger.error("No command converted successfully; no MAML file written")
            return summary

        if file_name is None:
            module_name = self.commands[0].module_name or "commands"
            file_name = f"{module_name}-help.xml"

        help_items = HelpItems(commands=[r.command for r in converted])
        path = write_to_file(help_items, folder / file_name, self.settings.encoding)
        for result in converted:
            result.status = "written"
            result.path = path
        summary.files.append(path)

        return summary


def generate_markdown(
    commands: Sequence[CommandHelp],
    settings: Settings,
    metadata: Optional[Mapping[str, Any]] = None,
    module_page_path: Optional[Path] = None,
    show_progress: bool = False
) -> BatchSummary:
    """Convenience wrapper running HelpGenerationPipeline.generate_markdown."""
    pipeline = HelpGenerationPipeline(commands, settings, metadata, show_progress)
    return asyncio.run(pipeline.generate_markdown(module_page_path))


def generate_maml(
    commands: Sequence[CommandHelp],
    settings: Settings,
    file_name: Optional[str] = None,
    show_progress: bool = False
) -> BatchSummary:
    """Convenience wrapper running HelpGenerationPipeline.generate_maml."""
    pipeline = HelpGenerationPipeline(commands, settings, show_progress=show_progress)
    return asyncio.run(pipeline.generate_maml(file_name))
