# -*- coding: utf-8 -*-
"""
命令行入口

用法:
    LICENSE_SNIPPET='Copyright 2024 Acme\\nAll rights reserved' license-inserter <path>
"""

import argparse
import logging
import sys
from typing import List, Mapping, Optional

import requests

from license_inserter import __version__
from license_inserter.config import ConfigError, get_license_snippet, get_license_url
from license_inserter.inserter import LicenseInserter

logger = logging.getLogger('LicenseInserter')


def setup_logging(verbose: bool = False) -> None:
    """诊断信息输出到 stderr，状态行仍走 stdout"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='license-inserter',
        description='Insert a license header comment into source files.',
    )
    parser.add_argument('path', help='file or directory to process')
    parser.add_argument('-k', '--keep-going', action='store_true',
                        help='record per-file I/O errors and continue instead of aborting')
    parser.add_argument('--no-summary', action='store_true',
                        help='do not print the final counts')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """主函数，返回进程退出码"""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        lines = get_license_snippet(environ)
        inserter = LicenseInserter(
            lines,
            license_url=get_license_url(environ),
            keep_going=args.keep_going,
        )
        report = inserter.process(args.path)
    except ConfigError as e:
        logger.error(str(e))
        return 1
    except requests.RequestException as e:
        logger.error(f"许可证下载失败: {e}")
        return 1
    except OSError as e:
        logger.error(f"文件处理失败: {e}")
        return 1

    if not args.no_summary:
        print(str(report))

    return 1 if report.errors else 0


if __name__ == '__main__':
    sys.exit(main())
