"""LLM 工厂模块

根据配置文件创建和管理 LLM 实例。
遵循安全协议：从不读取 .env 文件，只从系统环境变量获取密钥。
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI

from fitfinder.errors import ConfigurationError

# 未配置 timeout 时的默认请求超时（秒）
DEFAULT_TIMEOUT = 30


class LLMFactory:
    """LLM 工厂类，负责创建和管理 LLM 实例"""

    def __init__(self, config_path: Optional[str] = None):
        """初始化工厂，记录配置文件路径（延迟加载）

        Args:
            config_path: 配置文件路径；为 None 时依次使用环境变量 LLM_CONFIG_PATH
                和 backend/llm_config.json
        """
        if config_path is None:
            env_path = os.getenv("LLM_CONFIG_PATH")
            if env_path:
                self.config_path = env_path
            else:
                # 默认路径：从 backend/fitfinder/llm/llm_factory.py 到 backend/llm_config.json
                default_path = Path(__file__).parent.parent.parent / "llm_config.json"
                self.config_path = str(default_path)
        else:
            self.config_path = config_path
        self._loaded_config = None

    def _load_config(self) -> Dict[str, Any]:
        """加载配置文件

        Returns:
            配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            json.JSONDecodeError: JSON 格式错误
        """
        if self._loaded_config is None:
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    self._loaded_config = json.load(f)
            except FileNotFoundError:
                raise FileNotFoundError(f"配置文件不存在: {self.config_path}")
            except json.JSONDecodeError as e:
                raise json.JSONDecodeError(f"JSON 格式错误: {e}", e.doc, e.pos)

        return self._loaded_config

    def get_active_model_config(self) -> Dict[str, Any]:
        """获取当前激活的模型配置

        Returns:
            当前激活模型的配置字典

        Raises:
            ValueError: active_model 不存在或对应的 provider 配置不存在
        """
        config = self._load_config()

        active_model = config.get("active_model")
        if not active_model:
            raise ValueError("配置文件中缺少 active_model 字段")

        providers = config.get("providers")
        if not providers:
            raise ValueError("配置文件中缺少 providers 字段")

        model_config = providers.get(active_model)
        if not model_config:
            raise ValueError(f"providers 中找不到 '{active_model}' 的配置")

        return model_config

    def get_env_key(self) -> str:
        """获取当前模型凭据对应的环境变量名

        Raises:
            ValueError: 模型配置中缺少 env_key_map
        """
        env_key = self.get_active_model_config().get("env_key_map")
        if not env_key:
            raise ValueError("模型配置中缺少 env_key_map 字段")
        return env_key

    def _get_api_key(self, env_key: str) -> str:
        """从系统环境变量获取 API Key

        Args:
            env_key: 环境变量名

        Returns:
            API Key 字符串

        Raises:
            ConfigurationError: 环境变量不存在或为空
        """
        api_key = os.getenv(env_key)
        if not api_key:
            raise ConfigurationError(
                f"{env_key} is required to generate structured match and questions."
            )

        return api_key

    def ensure_credentials(self) -> None:
        """检查当前模型的凭据是否已配置，不创建客户端

        在开销较大的步骤（解码、PDF 解析）之前调用，让配置问题尽早暴露。

        Raises:
            ConfigurationError: 凭据缺失
        """
        self._get_api_key(self.get_env_key())

    def create_llm(self) -> Any:
        """创建并返回 LLM 实例

        Returns:
            LangChain LLM 对象 (ChatOpenAI 或 ChatGoogleGenerativeAI)

        Raises:
            ConfigurationError: 凭据缺失
            ValueError: 配置错误
            NotImplementedError: 不支持的模型类型
        """
        model_config = self.get_active_model_config()

        api_key = self._get_api_key(self.get_env_key())

        base_url = model_config.get("base_url")
        model_name = model_config.get("model_name")
        temperature = model_config.get("temperature", 0.2)
        timeout = model_config.get("timeout", DEFAULT_TIMEOUT)

        if not model_name:
            raise ValueError("模型配置中缺少 model_name 字段")

        active_model = self._load_config()["active_model"]

        if active_model == "gemini":
            # Google Gemini
            return ChatGoogleGenerativeAI(
                google_api_key=api_key,
                model=model_name,
                temperature=temperature,
                timeout=timeout
            )
        elif active_model == "openai_official":
            # OpenAI 官方
            return ChatOpenAI(
                api_key=api_key,
                base_url=base_url,
                model=model_name,
                temperature=temperature,
                timeout=timeout
            )
        else:
            raise NotImplementedError(f"不支持的模型类型: {active_model}")


def get_llm(factory: Optional[LLMFactory] = None):
    """获取 LLM 实例的便捷函数

    Args:
        factory: 指定工厂；为 None 时按默认配置新建

    Returns:
        LangChain LLM 对象
    """
    return (factory or LLMFactory()).create_llm()
