# -*- coding: utf-8 -*-
"""
license_inserter - 为源码文件批量插入许可证头注释
"""

__version__ = "1.0.0"
