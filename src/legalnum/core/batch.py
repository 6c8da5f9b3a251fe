import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

import yaml
from tqdm import tqdm

from ..config import OUTPUT_FORMATS, DEFAULT_OUTPUT_FORMAT
from .formatter import JapaneseNumberFormatter

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    source: str
    value: Optional[str]


class BatchConverter:
    def __init__(self, formatter: Optional[JapaneseNumberFormatter] = None):
        self.formatter = formatter or JapaneseNumberFormatter()

    def convert_lines(self, lines: Iterable[str]) -> Iterator[ConversionResult]:
        for line in lines:
            source = line.strip()
            if not source:
                continue
            yield ConversionResult(source=source, value=self.formatter.format(source))

    def _write(self, results: List[ConversionResult], output_path: Path, fmt: str):
        records = [asdict(r) for r in results]
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            if fmt == "yaml":
                yaml.dump(records, f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            else:
                for record in records:
                    f.write(json.dumps(record, ensure_ascii=False) + "\n")

    def convert_file(self, input_path: Path, output_path: Path, fmt: str = DEFAULT_OUTPUT_FORMAT) -> Dict[str, int]:
        """
        Convert a file with one numeral per line and write the results.

        Returns a summary with total/converted/rejected counts.
        """
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {fmt}. Must be one of {OUTPUT_FORMATS}.")

        with open(input_path, "r", encoding="utf-8") as f:
            lines = f.readlines()

        results = list(self.convert_lines(tqdm(lines, desc="Converting numerals")))
        self._write(results, Path(output_path), fmt)

        rejected = [r for r in results if r.value is None]
        for r in rejected:
            logger.warning(f"Could not convert: {r.source!r}")

        summary = {
            "total": len(results),
            "converted": len(results) - len(rejected),
            "rejected": len(rejected),
        }
        logger.info(f"Wrote {summary['total']} results to {output_path}")
        return summary
