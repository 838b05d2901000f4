import os
import threading
from typing import Self

from base.BaseData import BaseData
from base.BaseLanguage import BaseLanguage
from base.LogManager import LogManager
from module.Utils.JSONTool import JSONTool


class Config(BaseData):

    # 默认路径
    CONFIG_PATH = "./resource/config.json"

    # 配置锁
    CONFIG_LOCK = threading.Lock()

    def __init__(self) -> None:
        super().__init__()

        # Application
        self.expert_mode: bool = False

        # Language
        self.source_language: str = BaseLanguage.EN
        self.target_language: str = BaseLanguage.FR
        self.renpy_language: str = ""

        # Project
        self.input_folder: str = "./input"
        self.output_folder: str = "./output"
        self.output_encoding: str = ""

    @classmethod
    def get_config_path(cls) -> str:
        return os.environ.get("RENPYFILLER_CONFIG", __class__.CONFIG_PATH)

    def load(self, path: str | None = None) -> Self:
        if path is None:
            path = __class__.get_config_path()

        with __class__.CONFIG_LOCK:
            try:
                if os.path.isfile(path):
                    config = JSONTool.load_file(path)
                    if isinstance(config, dict):
                        self.set_vars(config)
            except Exception as e:
                LogManager.get().error(f"Failed to read config file: {path}", e)

        return self

    def save(self, path: str | None = None) -> Self:
        if path is None:
            path = __class__.get_config_path()

        with __class__.CONFIG_LOCK:
            try:
                os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
                JSONTool.save_file(path, self.get_vars(), indent=4)
            except Exception as e:
                LogManager.get().error(f"Failed to write config file: {path}", e)

        return self

    # Ren'Py 的 tl 目录名，未配置时根据目标语言推导，均无效时匹配任意语言
    def get_renpy_language(self) -> str | None:
        if self.renpy_language != "":
            return self.renpy_language

        name = BaseLanguage.get_renpy_name(self.target_language)
        if name == "":
            return None

        return name
