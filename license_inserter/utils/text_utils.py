# -*- coding: utf-8 -*-
"""
文本处理工具函数
"""

from typing import List

# 环境变量中用字面量 "\n" (两个字符) 表示换行
SNIPPET_LINE_SEPARATOR = '\\n'


def split_snippet(snippet: str) -> List[str]:
    """
    将许可证片段按字面量 \\n 拆分为行

    Args:
        snippet: 环境变量中的原始字符串

    Returns:
        List[str]: 各行文本，顺序不变
    """
    return snippet.split(SNIPPET_LINE_SEPARATOR)


def head_lines(content: bytes, count: int) -> bytes:
    """
    取内容的前 count 行(不足则取全部)，以换行重新拼接

    Args:
        content: 文件内容
        count: 行数

    Returns:
        bytes: 前几行拼接结果
    """
    return b'\n'.join(content.split(b'\n')[:count])


def build_header(prefix: str, lines: List[str]) -> str:
    """每行加上注释前缀和一个空格，末尾再补一个空行"""
    header = ''.join(f"{prefix} {line}\n" for line in lines)
    return header + '\n'


def file_extension(name: str) -> str:
    """
    取文件名中最后一个 '.' 起的后缀

    与 os.path.splitext 不同，'.gitignore' 这类点开头的文件名
    整体视为扩展名。

    Args:
        name: 文件名(不含目录)

    Returns:
        str: 扩展名，没有 '.' 时返回空字符串
    """
    idx = name.rfind('.')
    if idx < 0:
        return ''
    return name[idx:]
