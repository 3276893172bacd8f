"""Configuration management for the SVG document generator."""

from pydantic_settings import BaseSettings

from svgdoc.models import PageConfig, RenderProfile


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Page geometry (points)
    page_width: float = 595
    page_height: float = 842
    margin_x: float = 50
    margin_top: float = 60
    margin_bottom: float = 60

    # Vertical rhythm
    line_height: float = 24
    title_gap: float = 10
    subheading_gap: float = 6
    blank_gap: float = 12
    growth_lines: int = 10

    # Decoration
    bullet_indent: float = 16
    warning_indent: float = 20
    default_profile: RenderProfile = RenderProfile.DECORATED

    # Output
    format_label: str = "SVG"
    output_dir: str = "./output"

    # Logging
    log_level: str = "INFO"

    def page_config(self) -> PageConfig:
        """Construct the default page configuration."""
        return PageConfig(
            width=self.page_width,
            height=self.page_height,
            margin_x=self.margin_x,
            margin_top=self.margin_top,
            margin_bottom=self.margin_bottom,
        )

    class Config:
        env_prefix = "SVGDOC_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
