import logging
from pathlib import Path
from typing import Dict, Any, Union

import yaml

logger = logging.getLogger(__name__)


class ConfigLoader:
    """YAML配置加载器"""

    def load_config(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """从YAML文件加载配置"""
        path = Path(config_path)
        if not path.exists():
            logger.error(f"配置文件不存在: {path}")
            raise FileNotFoundError(f"配置文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error(f"解析YAML配置文件失败: {e}")
                raise
        return config or {}

    def save_config(self, config: Dict[str, Any], config_path: Union[str, Path]):
        """将配置保存到YAML文件"""
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config, f, indent=2)
        logger.info(f"配置已保存到 {config_path}")
