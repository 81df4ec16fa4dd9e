"""Operator-facing message tables (English and Chinese)."""

import re
from dataclasses import dataclass

_POSITIONAL = re.compile(r"\{(\d+)\}")


@dataclass(frozen=True)
class Messages:
    """Localized strings shown in notifications and CLI output."""

    plugin_name: str
    server_started: str
    server_stopped: str
    server_error: str
    server_restarted: str
    settings_reloaded: str
    settings_saved: str
    ics_link_title: str
    instructions_title: str
    instruction1: str
    instruction2: str
    instruction3: str


EN = Messages(
    plugin_name="Diary ICS",
    server_started="ICS server started: {0}",
    server_stopped="ICS server stopped",
    server_error="HTTP server error: {0}",
    server_restarted="Port applied, server restarted: {0}",
    settings_reloaded="Settings reloaded from {0}",
    settings_saved="Setting '{0}' saved",
    ics_link_title="ICS Subscription Link",
    instructions_title="Instructions",
    instruction1="1. Copy the ICS subscription link above",
    instruction2="2. Add this subscription link in your system calendar application",
    instruction3="3. Keep the server running so calendar clients can fetch the ICS file",
)

ZH = Messages(
    plugin_name="日记日历订阅",
    server_started="ICS服务器已启动: {0}",
    server_stopped="ICS服务器已关闭",
    server_error="HTTP服务器错误: {0}",
    server_restarted="端口已应用，服务器已重启: {0}",
    settings_reloaded="已从 {0} 重新加载设置",
    settings_saved="设置 '{0}' 已保存",
    ics_link_title="ICS订阅链接",
    instructions_title="使用说明",
    instruction1="1. 复制上面的ICS订阅链接",
    instruction2="2. 在系统日历应用中添加该订阅链接",
    instruction3="3. 保持服务器运行，以便日历应用能够获取ICS文件",
)


def get_messages(language: str) -> Messages:
    """Message table for a language tag; anything not Chinese gets English."""
    return ZH if language.lower().startswith("zh") else EN


def format_string(template: str, *args) -> str:
    """Fill ``{0}``, ``{1}``... placeholders; missing arguments stay literal."""

    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _POSITIONAL.sub(replace, template)
