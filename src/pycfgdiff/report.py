# -*- encoding: utf-8 -*-
# @File   : report.py
# @Time   : 2026/10/12 15:02:48
# @Author : Kariko Lin

"""Report writers. The text one looks like:

    # app.cfg (1)
      db.host
        db-staging.local
        db-prod.local
"""

import json
from typing import Sequence

import yaml

from .abstract import FileWriter
from .compare import FileReport
from .consts import STDOUT, ReportFormat


class ReportWriter(FileWriter[Sequence[FileReport]]):
    @staticmethod
    def to_document(reports: Sequence[FileReport]) -> dict:
        return {'files': [i.to_dict() for i in reports]}


class TextReportWriter(ReportWriter):
    def write(self, instance: Sequence[FileReport]) -> None:
        with self._open() as fp:
            for report in instance:
                fp.write(f'# {report.name} ({report.count})\n')
                for i in report.differences:
                    fp.write(f'  {i.key}\n    {i.left}\n    {i.right}\n')


class JsonReportWriter(ReportWriter):
    def __init__(self, filename: str = STDOUT, indent: int = 2, **kwargs):
        super().__init__(filename, **kwargs)
        self._indent = indent

    def write(self, instance: Sequence[FileReport]) -> None:
        with self._open() as fp:
            json.dump(self.to_document(instance), fp,
                      indent=self._indent, ensure_ascii=False)
            fp.write('\n')


class YamlReportWriter(ReportWriter):
    def write(self, instance: Sequence[FileReport]) -> None:
        with self._open() as fp:
            # values like `yes` or `0x10` are quoted by the safe dumper.
            yaml.safe_dump(self.to_document(instance), fp,
                           allow_unicode=True, sort_keys=False)


_WRITERS: dict[ReportFormat, type[ReportWriter]] = {
    ReportFormat.TEXT: TextReportWriter,
    ReportFormat.JSON: JsonReportWriter,
    ReportFormat.YAML: YamlReportWriter,
}


def get_writer(
    fmt: ReportFormat | str, filename: str = STDOUT
) -> ReportWriter:
    try:
        fmt = ReportFormat(fmt)
    except ValueError:
        raise ValueError(f'unknown report format: {fmt!r}') from None
    return _WRITERS[fmt](filename)
