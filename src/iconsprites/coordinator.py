from __future__ import annotations

import os
import sys
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable

from .classify import classify
from .errors import ClassificationError, PackingError, SpriteError, ValidationError
from .fs import LocalFileSystem
from .models import (
    Invalid,
    PackedResult,
    PackFailure,
    PackOutcome,
    Skip,
)
from .naming import format_number
from .options import Options, SpriteGroupSpec, validate_options
from .packing import Packer, default_packers, failure_message
from .progress import ProgressBar
from .writers import ArtifactWriter


class SizeRegistry:
    def __init__(self) -> None:
        self._sizes: list[int] = []

    def merge(self, sizes: Iterable[int]) -> None:
        for size in sizes:
            if size not in self._sizes:
                self._sizes.append(size)

    def __len__(self) -> int:
        return len(self._sizes)

    def __contains__(self, size: object) -> bool:
        return size in self._sizes

    def sorted(self) -> list[int]:
        self._sizes.sort()
        return list(self._sizes)


@dataclass
class RunContext:
    total: int = 0
    settled: int = 0
    written: int = 0
    failed: int = 0
    sizes: SizeRegistry = field(default_factory=SizeRegistry)

    def settle_one(self) -> bool:
        if self.settled >= self.total:
            raise RuntimeError(f"More settlements than dispatched groups ({self.total})")
        self.settled += 1
        return self.settled == self.total


@dataclass(frozen=True)
class Dispatch:
    index: int
    spec: SpriteGroupSpec
    extension: str


def default_worker_count() -> int:
    return max(1, min(8, (os.cpu_count() or 1)))


def validate_result(result: PackedResult) -> list[int]:
    errors: list[str] = []
    sizes: list[int] = []
    for icon in result.icons:
        width = format_number(icon.width)
        height = format_number(icon.height)
        if icon.width != icon.height:
            errors.append(f"  Width ({width}px) and height ({height}px) of '{icon.file_name}' have to be same.")
        elif (icon.width <= 0) or (not float(icon.width).is_integer()):
            errors.append(f"  Size ({width}px) of '{icon.file_name}' has to be a positive whole number of pixels.")
        elif int(icon.width) not in sizes:
            sizes.append(int(icon.width))

    if errors:
        raise ValidationError(result.group_name, errors)
    return sizes


class SpriteGenerator:
    def __init__(
        self,
        options: Options,
        fs: LocalFileSystem | None = None,
        packers: dict[str, Packer] | None = None,
        writer: ArtifactWriter | None = None,
        workers: int | None = None,
    ) -> None:
        self.options = validate_options(options)
        self.fs = fs if fs is not None else LocalFileSystem()
        self.packers = packers if packers is not None else default_packers()
        self.writer = writer if writer is not None else ArtifactWriter(options, self.fs)
        self.workers = max(1, workers if workers is not None else default_worker_count())

    def delete_target_folders(self) -> None:
        for folder in self.options.target_folder.all():
            self.fs.delete_tree(folder)

    def generate(self) -> None:
        context = RunContext()
        self.delete_target_folders()

        rejected: list[tuple[Dispatch, Invalid]] = []
        pending: dict[Future[PackOutcome], Dispatch] = {}

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            for index, spec in enumerate(self.options.sprites):
                decision = classify(spec, self.fs)
                if isinstance(decision, Skip):
                    continue

                print(f"Processing '{spec.name}' from '{spec.source_folder}'...")
                if isinstance(decision, Invalid):
                    rejected.append((Dispatch(index, spec, ""), decision))
                    continue

                packer = self.packers[decision.extension]
                future = executor.submit(packer.pack, list(decision.files), self.options.padding)
                pending[future] = Dispatch(index, spec, decision.extension)

            context.total = len(rejected) + len(pending)
            progress = ProgressBar("sprites", context.total)

            for dispatch, invalid in rejected:
                self.settle(context, dispatch, invalid)
                progress.update(context.settled)

            for future in as_completed(pending):
                dispatch = pending[future]
                try:
                    outcome = future.result()
                except Exception as e:
                    outcome = PackFailure(failure_message(e))
                self.settle(context, dispatch, outcome)
                progress.update(context.settled)

        print(f"sprites: {context.total} dispatched, {context.written} written, {context.failed} failed")

    def settle(self, context: RunContext, dispatch: Dispatch, outcome: PackOutcome | Invalid) -> None:
        try:
            result = self.accept(dispatch, outcome)
            sizes = validate_result(result)
        except SpriteError as e:
            self.report_failure(e)
            context.failed += 1
        else:
            try:
                self.writer.write_group(result)
            except OSError as e:
                self.writer.discard_group(result)
                self.report_failure(PackingError(f"Cannot write sprite '{result.group_name}': {e}"))
                context.failed += 1
            else:
                context.sizes.merge(sizes)
                context.written += 1

        if context.settle_one():
            self.finalize(context)

    def accept(self, dispatch: Dispatch, outcome: PackOutcome | Invalid) -> PackedResult:
        if isinstance(outcome, Invalid):
            raise ClassificationError(outcome.reason)
        if isinstance(outcome, PackFailure):
            raise PackingError(outcome.message)
        return PackedResult(
            group_index=dispatch.index,
            group_name=dispatch.spec.name,
            extension=dispatch.extension,
            icons=outcome.placements,
            image=outcome.image,
        )

    def report_failure(self, error: SpriteError) -> None:
        if isinstance(error, ValidationError):
            print(str(error), file=sys.stderr)
        else:
            print(f"error: {error}", file=sys.stderr)

    def finalize(self, context: RunContext) -> None:
        if not len(context.sizes):
            return
        self.writer.write_sizes(context.sizes.sorted())
