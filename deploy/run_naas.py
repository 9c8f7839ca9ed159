#!/usr/bin/env python3
"""启动 NaaS 服务：租户与命名空间注册 API。"""
import os
import sys

sys.path.insert(0, os.environ.get("APP_ROOT", os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from naas.api.app import main

main()
