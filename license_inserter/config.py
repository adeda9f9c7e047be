# -*- coding: utf-8 -*-
"""
License Inserter 配置
静态扩展名表、常量以及环境变量读取
"""

import os
from types import MappingProxyType
from typing import Mapping, Optional, List

from license_inserter.utils.text_utils import split_snippet


class ConfigError(Exception):
    """配置缺失或无效"""


# 扩展名(或完整文件名) -> 注释前缀
EXTENSIONS: Mapping[str, str] = MappingProxyType({
    '.go': '//',
    '.js': '//',
    '.proto': '//',
    '.sql': '--',
    '.gitignore': '#',
    '.dockerignore': '#',
    '.helmignore': '#',
    '.tf': '#',
    '.tfvars': '#',
    '.bashrc': '#',
    'Dockerfile': '#',
    'Makefile': '#',
})

# 第三方依赖目录，目录下的文件一律跳过
EXCLUDED_DIRS = frozenset({'node_modules'})
MINIFIED_MARKER = '.min.'

# 只检查文件开头的行数
HEADER_SCAN_LINES = 5
COPYRIGHT_MARKER = b'Copyright'
DO_NOT_EDIT_MARKER = b'DO NOT EDIT'

LICENSE_FILES = ('LICENSE', 'LICENSE.md')
LICENSE_OUTPUT_FILE = 'LICENSE'
FILE_MODE = 0o644
DOWNLOAD_CHUNK_SIZE = 8192

SNIPPET_ENV = 'LICENSE_SNIPPET'
URL_ENV = 'LICENSE_URL'


def get_license_snippet(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    读取 LICENSE_SNIPPET 并拆分为行

    Args:
        environ: 环境变量映射，默认为 os.environ

    Returns:
        List[str]: 许可证片段的各行

    Raises:
        ConfigError: 变量未设置或为空
    """
    if environ is None:
        environ = os.environ
    snippet = environ.get(SNIPPET_ENV, '')
    if not snippet:
        raise ConfigError(f"Please set up {SNIPPET_ENV} env var")
    return split_snippet(snippet)


def get_license_url(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """读取可选的 LICENSE_URL，空字符串视为未配置"""
    if environ is None:
        environ = os.environ
    return environ.get(URL_ENV) or None
