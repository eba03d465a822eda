"""Banner generation for application."""

from pyfiglet import figlet_format

from taskboard.config.config import Settings

__all__ = ["create_banner"]


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    lines: list[str] = []

    banner = figlet_format("TASKBOARD", font="slant")
    lines.extend([
        "\033[1;36m" + banner + "\033[0m",
        f"\033[1;33m📝 Taskboard Service v{settings.version}\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    log_level_colors = {
        "DEBUG": "\033[1;34m",
        "INFO": "\033[1;32m",
        "WARNING": "\033[1;33m",
        "ERROR": "\033[1;31m",
        "CRITICAL": "\033[1;35m",
    }
    log_level_color = log_level_colors.get(settings.log_level, "\033[0;37m")
    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    host = "0.0.0.0" if settings.host_binding == "0.0.0.0" else "localhost"  # noqa: S104
    lines.extend([
        f"🌍 Environment: {env_color}{settings.app_env}\033[0m",
        f"🔌 API: http://{host}:{settings.port}/tasks",
        f"📋 Docs: http://localhost:{settings.port}/docs",
        f"📊 Metrics: http://localhost:{settings.port}/metrics",
        f"🔄 Auto Reload: {'✅' if settings.reload else '❌'}",
    ])

    lines.extend([
        "\n\033[1;33m💾 Database Configuration\033[0m",
        f"  • Engine: {settings.db_url.split('://')[0]}",
        f"  • Clear on Restart: {'✅' if settings.clear_db_on_restart else '❌'}",
        f"  • Seed on Start: {'✅' if settings.seed_db_on_start else '❌'}",
    ])

    lines.extend([
        "\n\033[1;33m📝 Logging Configuration\033[0m",
        f"  • Log Level: {log_level_color}{settings.log_level}\033[0m",
        f"  • Log Path: {settings.log_path if settings.app_env != 'production' else 'stderr'}",  # noqa: E501
    ])

    lines.append(f"\033[0;37m{'-' * 60}\033[0m")

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
