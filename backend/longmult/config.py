"""
Configuration management for the long multiplication calculator
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    app_env: str = "dev"
    port: int = 8000
    log_level: str = "INFO"
    
    # Gateway defaults for the optional parameters
    default_output_type: str = "plain"
    default_print_description: str = "yes"
    
    # Longest operand the gateway accepts (None disables the check)
    max_operand_digits: Optional[int] = 1000
    
    # Footer of the box-drawing table (lines for unset fields are skipped)
    table_author: Optional[str] = None
    table_email: Optional[str] = None
    table_license: Optional[str] = None
    table_project: Optional[str] = None
    
    class Config:
        env_prefix = "LONGMULT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
    
    @property
    def is_dev(self) -> bool:
        """Whether the application runs in development mode"""
        return self.app_env == "dev"
    
    @property
    def table_footer(self) -> List[str]:
        """Footer lines of the box-drawing table"""
        fields = [
            ("Author", self.table_author),
            ("E-mail", self.table_email),
            ("License", self.table_license),
            ("Project", self.table_project),
        ]
        return [f"{label}: {value}" for label, value in fields if value]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
