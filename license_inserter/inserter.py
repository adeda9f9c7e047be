# -*- coding: utf-8 -*-
"""
License Inserter 核心逻辑
分类文件、插入许可证头、遍历目录
"""

import enum
import logging
import os
import stat
import tempfile
from pathlib import PurePath
from typing import List, Mapping, Optional

from license_inserter.config import (
    COPYRIGHT_MARKER,
    DO_NOT_EDIT_MARKER,
    EXCLUDED_DIRS,
    EXTENSIONS,
    HEADER_SCAN_LINES,
    MINIFIED_MARKER,
)
from license_inserter.utils.downloader import ensure_license_file
from license_inserter.utils.report import Stat
from license_inserter.utils.text_utils import build_header, file_extension, head_lines

logger = logging.getLogger('LicenseInserter.Inserter')


class InsertResult(enum.Enum):
    INSERTED = '[INSERTED]    '
    ALREADY = '[ALREADY]     '
    DO_NOT_EDIT = '[DO NOT EDIT] '


def classify(path: str, extensions: Mapping[str, str] = EXTENSIONS) -> Optional[str]:
    """
    根据扩展名或完整文件名确定注释前缀

    Args:
        path: 文件路径
        extensions: 扩展名 -> 注释前缀 映射

    Returns:
        Optional[str]: 注释前缀；不适用的文件返回 None
    """
    parts = PurePath(path).parts
    name = parts[-1] if parts else ''

    prefix = extensions.get(file_extension(name))
    if prefix is None:
        prefix = extensions.get(name)
    if prefix is None:
        return None

    if any(part in EXCLUDED_DIRS for part in parts[:-1]):
        return None
    if MINIFIED_MARKER in str(path):
        return None
    return prefix


def _replace_content(path: str, data: bytes) -> None:
    """
    先写入同目录临时文件再原子替换，写入失败时原文件不受影响

    新文件沿用原文件的权限位。
    """
    dirname, name = os.path.split(path)
    mode = stat.S_IMODE(os.stat(path).st_mode)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{name}.", suffix='.tmp', dir=dirname or '.')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def insert_license(path: str, prefix: str, lines: List[str], report: Stat) -> InsertResult:
    """
    在文件开头插入许可证头

    前几行已含 Copyright 或 DO NOT EDIT 的文件保持不变。

    Args:
        path: 文件路径
        prefix: 注释前缀
        lines: 许可证片段各行
        report: 运行统计

    Returns:
        InsertResult: 处理结果

    Raises:
        OSError: 读写失败
    """
    with open(path, 'rb') as f:
        content = f.read()

    first_lines = head_lines(content, HEADER_SCAN_LINES)

    if COPYRIGHT_MARKER in first_lines:
        result = InsertResult.ALREADY
        report.skipped += 1
    elif DO_NOT_EDIT_MARKER in first_lines:
        result = InsertResult.DO_NOT_EDIT
        report.do_not_modify += 1
    else:
        header = build_header(prefix, lines).encode('utf-8')
        _replace_content(path, header + content)
        result = InsertResult.INSERTED
        report.added += 1

    print(result.value + path)
    return result


class LicenseInserter:
    """对单个文件或整个目录树插入许可证头"""

    def __init__(self, lines: List[str], extensions: Mapping[str, str] = EXTENSIONS,
                 license_url: Optional[str] = None, keep_going: bool = False,
                 report: Optional[Stat] = None):
        self.lines = lines
        self.extensions = extensions
        self.license_url = license_url
        self.keep_going = keep_going
        self.report = report if report is not None else Stat()

    def process(self, target: str) -> Stat:
        """按目标类型分派：目录遍历，普通文件直接处理"""
        mode = os.stat(target).st_mode

        if stat.S_ISDIR(mode):
            ensure_license_file(target, self.license_url)
            self.walk(target)
        elif stat.S_ISREG(mode):
            self.process_file(target)
        else:
            logger.warning(f"既不是目录也不是普通文件，跳过: {target}")

        return self.report

    def walk(self, root: str) -> None:
        """递归遍历目录，目录读取失败直接抛出"""
        for dirpath, _, filenames in os.walk(root, onerror=_raise_walk_error):
            for filename in filenames:
                fpath = os.path.join(dirpath, filename)
                if os.path.islink(fpath):
                    logger.debug(f"跳过符号链接: {fpath}")
                    continue
                self.process_file(fpath)

    def process_file(self, path: str) -> Optional[InsertResult]:
        prefix = classify(path, self.extensions)
        if prefix is None:
            return None
        try:
            return insert_license(path, prefix, self.lines, self.report)
        except OSError as e:
            self.handle_file_error(path, e)
            return None

    def handle_file_error(self, path: str, error: OSError) -> None:
        """单文件读写失败：默认中止整个运行，keep_going 时记录后继续"""
        if not self.keep_going:
            raise error
        logger.error(f"处理文件失败: {path}: {error}")
        self.report.errors += 1


def walk(root: str, lines: List[str], report: Stat,
         extensions: Mapping[str, str] = EXTENSIONS) -> None:
    """遍历 root 下所有文件并插入许可证头，遇到第一个错误即中止"""
    LicenseInserter(lines, extensions=extensions, report=report).walk(root)


def _raise_walk_error(error: OSError) -> None:
    raise error
