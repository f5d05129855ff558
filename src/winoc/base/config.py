"""
NoC配置基类。

本模块提供可被特定NoC拓扑实现扩展的基础配置类，
提供统一的参数读写、字典转换和JSON持久化接口。
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Union
import json

from src.winoc.utils.types import TopologyType, ConfigDict, ValidationResult, VerboseMode, DEFAULT_VIRTUAL_CHANNELS


class BaseNoCConfig(ABC):
    """
    NoC配置的抽象基类。

    该类定义了所有NoC拓扑配置必须实现的通用接口。
    提供基本的参数验证和配置管理功能。
    """

    def __init__(self, topology_type: TopologyType = TopologyType.MESH):
        """
        初始化基础NoC配置。

        Args:
            topology_type: NoC拓扑类型
        """
        # 核心拓扑参数
        self.topology_type = topology_type
        self.num_nodes = 16

        # 虚拟通道数只被trace输出使用
        self.n_virtual_channels = DEFAULT_VIRTUAL_CHANNELS

        # 调试输出
        self.verbose_mode = VerboseMode.OFF

        # 自定义参数存储
        self._custom_params = {}

    @abstractmethod
    def validate_config(self) -> ValidationResult:
        """
        验证配置参数。

        Returns:
            返回(是否有效, 错误信息)的元组
        """
        pass

    @abstractmethod
    def get_topology_params(self) -> Dict[str, Any]:
        """
        获取拓扑特定参数。

        Returns:
            包含拓扑特定配置参数的字典
        """
        pass

    def set_parameter(self, key: str, value: Any) -> bool:
        """
        设置配置参数。

        Args:
            key: 参数名称
            value: 参数值

        Returns:
            总是返回True；未知参数存入自定义参数
        """
        if hasattr(self, key):
            setattr(self, key, value)
        else:
            self._custom_params[key] = value
        return True

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """
        获取配置参数。

        Args:
            key: 参数名称
            default: 如果参数未找到时的默认值

        Returns:
            参数值或默认值
        """
        if hasattr(self, key):
            return getattr(self, key)
        return self._custom_params.get(key, default)

    def to_dict(self) -> ConfigDict:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary representation of the configuration
        """
        config_dict = {}

        for key, value in self.__dict__.items():
            if not key.startswith("_"):
                if hasattr(value, "value"):  # Handle Enum types
                    config_dict[key] = value.value
                else:
                    config_dict[key] = value

        config_dict.update(self._custom_params)
        config_dict.update(self.get_topology_params())

        return config_dict

    def from_dict(self, config_dict: ConfigDict) -> None:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration dictionary
        """
        for key, value in config_dict.items():
            if key == "topology_type":
                value = TopologyType(value)
            elif key == "verbose_mode":
                value = VerboseMode(value) if not isinstance(value, str) else VerboseMode[value.upper()]
            self.set_parameter(key, value)

    def save_to_file(self, filepath: str) -> None:
        """
        Save configuration to JSON file.

        Args:
            filepath: Path to save configuration file
        """
        config_dict = self.to_dict()

        def convert(obj):
            if hasattr(obj, "value"):
                return obj.value
            elif isinstance(obj, dict):
                # JSON keys must be strings
                return {str(k): convert(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [convert(item) for item in obj]
            return obj

        with open(filepath, "w") as f:
            json.dump(convert(config_dict), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> "BaseNoCConfig":
        """
        Load configuration from JSON file.

        Args:
            filepath: Path to configuration file

        Returns:
            Loaded configuration instance
        """
        with open(filepath, "r") as f:
            config_dict = json.load(f)

        instance = cls()
        instance.from_dict(config_dict)
        return instance

    def copy(self) -> "BaseNoCConfig":
        """
        Create a deep copy of the configuration.

        Returns:
            Copy of the configuration
        """
        new_config = self.__class__()
        new_config.from_dict(self.to_dict())
        return new_config

    def update(self, other_config: Union["BaseNoCConfig", ConfigDict]) -> None:
        """
        Update configuration with parameters from another config or dict.

        Args:
            other_config: Another configuration object or dictionary
        """
        if isinstance(other_config, BaseNoCConfig):
            config_dict = other_config.to_dict()
        else:
            config_dict = other_config

        self.from_dict(config_dict)

    def validate_basic_params(self) -> ValidationResult:
        """
        Validate basic configuration parameters.

        Returns:
            Tuple of (is_valid, error_message)
        """
        errors = []

        if self.num_nodes <= 0:
            errors.append("节点数必须为正数")

        if self.n_virtual_channels <= 0:
            errors.append("虚拟通道数必须为正数")

        if not isinstance(self.verbose_mode, VerboseMode):
            errors.append(f"无效的verbose_mode: {self.verbose_mode}")

        if errors:
            return False, "; ".join(errors)

        return True, None

    def __str__(self) -> str:
        """String representation of the configuration."""
        return f"{self.__class__.__name__}(topology={self.topology_type.value}, nodes={self.num_nodes})"

    def __repr__(self) -> str:
        """Detailed string representation of the configuration."""
        return f"{self.__class__.__name__}({self.to_dict()})"
