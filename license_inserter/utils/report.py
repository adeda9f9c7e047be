# -*- coding: utf-8 -*-
"""
运行统计
"""


class Stat:
    """单次运行的处理结果计数"""

    def __init__(self):
        self.added = 0
        self.skipped = 0
        self.do_not_modify = 0
        self.errors = 0

    @property
    def total(self) -> int:
        return self.added + self.skipped + self.do_not_modify + self.errors

    def __str__(self) -> str:
        summary = f"Added: {self.added}, Already: {self.skipped}, Do not edit: {self.do_not_modify}"
        if self.errors:
            summary += f", Errors: {self.errors}"
        return summary

    def __repr__(self) -> str:
        return f"<Stat {self}>"
