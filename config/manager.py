import json
from pathlib import Path
from typing import Optional
from loguru import logger
from pydantic import ValidationError

from .models import Settings


class ConfigManager:
    """应用设置文件管理器"""

    def __init__(self, config_file: str = "settings.json"):
        self.config_file = Path(config_file)
        self._settings: Optional[Settings] = None
        self._ensure_config_dir()

    def _ensure_config_dir(self):
        """确保配置文件目录存在"""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

    def _create_default_config(self) -> Settings:
        """创建默认配置"""
        logger.info("正在创建默认设置文件...")
        return Settings()

    def _save_config(self, settings: Settings):
        """保存配置到文件"""
        try:
            config_dict = settings.model_dump(mode="json")
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
            logger.info(f"设置已保存到 {self.config_file}")
        except Exception as e:
            logger.error(f"保存设置文件失败: {e}")
            raise

    def _load_config(self) -> Settings:
        """从文件加载配置"""
        if not self.config_file.exists():
            logger.warning(f"设置文件 {self.config_file} 不存在，将创建默认设置")
            settings = self._create_default_config()
            self._save_config(settings)
            return settings

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config_data = json.load(f)

            settings = Settings(**config_data)
            logger.info(f"成功加载设置文件: {self.config_file}")
            return settings

        except json.JSONDecodeError as e:
            logger.error(f"设置文件JSON格式错误: {e}")
            raise
        except ValidationError as e:
            logger.error(f"设置文件验证失败: {e}")
            raise

    def get_settings(self) -> Settings:
        """获取配置设置"""
        if self._settings is None:
            self._settings = self._load_config()
        return self._settings

    def reload_config(self) -> Settings:
        """重新加载配置"""
        logger.info("正在重新加载设置...")
        self._settings = self._load_config()
        return self._settings

    def update_config(self, **kwargs) -> Settings:
        """
        更新配置

        支持嵌套键，如 update_config(**{"log.level": "DEBUG"})
        """
        settings = self.get_settings()
        config_dict = settings.model_dump(mode="json")

        for key, value in kwargs.items():
            if '.' in key:
                keys = key.split('.')
                current = config_dict
                for k in keys[:-1]:
                    if k not in current:
                        current[k] = {}
                    current = current[k]
                current[keys[-1]] = value
            else:
                config_dict[key] = value

        try:
            new_settings = Settings(**config_dict)
            self._save_config(new_settings)
            self._settings = new_settings
            logger.info("设置更新成功")
            return new_settings
        except ValidationError as e:
            logger.error(f"设置更新失败，验证错误: {e}")
            raise

    def validate_config(self) -> bool:
        """验证配置完整性"""
        try:
            settings = self.get_settings()
            issues = []

            if not 0 < settings.app.port < 65536:
                issues.append(f"端口号无效: {settings.app.port}")

            if not settings.store.config_path:
                issues.append("登录配置文件路径未配置")

            for path in (settings.log.file_path, settings.store.config_path):
                if not path:
                    continue
                target_dir = Path(path).parent
                if target_dir.exists():
                    continue
                try:
                    target_dir.mkdir(parents=True, exist_ok=True)
                    logger.info(f"创建目录: {target_dir}")
                except OSError as e:
                    issues.append(f"无法创建目录 {target_dir}: {e}")

            if issues:
                logger.warning("设置验证发现问题:")
                for issue in issues:
                    logger.warning(f"  - {issue}")
                return False

            logger.info("设置验证通过")
            return True

        except (json.JSONDecodeError, ValidationError, OSError) as e:
            logger.error(f"设置验证失败: {e}")
            return False


# 全局配置管理器实例
config_manager = ConfigManager()
