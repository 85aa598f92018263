"""
画布编辑器几何核心

模块结构：
- config/     运行期配置、形状资源表、日志
- models/     数据模型定义（Frame/尺寸/几何描述/槽位）
- geometry/   比例解析、Frame归一化、多边形内核
- shapes/     形状注册表
- layout/     槽位默认落点
"""

__version__ = "0.1.0"
