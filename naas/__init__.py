"""
NaaS：多租户命名空间注册中心。
租户拥有命名空间；仅内存存储，进程重启即丢失。核心层见 naas.core，HTTP 层见 naas.api。
"""

__version__ = "1.0.0"
