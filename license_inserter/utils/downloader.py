# -*- coding: utf-8 -*-
"""
许可证文件下载 - 目标目录缺少 LICENSE 时从 URL 获取
"""

import logging
import os
from typing import Optional

import requests

from license_inserter.config import (
    DOWNLOAD_CHUNK_SIZE,
    FILE_MODE,
    LICENSE_FILES,
    LICENSE_OUTPUT_FILE,
)

logger = logging.getLogger('LicenseInserter.Downloader')


def has_license_file(root: str) -> bool:
    """目录下是否已有 LICENSE 或 LICENSE.md"""
    return any(os.path.exists(os.path.join(root, name)) for name in LICENSE_FILES)


def download_license(url: str, out_file: str) -> None:
    """
    下载许可证文本并原样写入 out_file

    响应头返回成功后才创建文件；写入中途失败会删除残留文件。

    Args:
        url: 许可证文本地址
        out_file: 输出文件路径

    Raises:
        requests.RequestException: 请求失败或状态码非 2xx
        OSError: 文件创建或写入失败
    """
    print("Downloading from " + url)

    with requests.get(url, stream=True) as response:
        response.raise_for_status()
        logger.debug(f"许可证下载响应: {response.status_code} {url}")

        try:
            fd = os.open(out_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, 'wb') as out:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    out.write(chunk)
        except (OSError, requests.RequestException):
            if os.path.exists(out_file):
                os.remove(out_file)
            raise

    logger.info(f"许可证文件已保存: {out_file}")


def ensure_license_file(root: str, url: Optional[str]) -> bool:
    """
    目录缺少许可证文件且配置了 URL 时下载

    Returns:
        bool: 是否下载了新文件
    """
    if not url:
        logger.debug("未配置 LICENSE_URL，跳过许可证下载")
        return False
    if has_license_file(root):
        logger.debug(f"已存在许可证文件，跳过下载: {root}")
        return False

    download_license(url, os.path.join(root, LICENSE_OUTPUT_FILE))
    return True
