"""
Taxonomy — Static file-extension table used to classify links.

Layout is category -> subcategory -> extensions. Only subcategory names ever
surface as link types; the top-level category just groups them.
See: https://www.computerhope.com/issues/ch001789.htm
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


_FILE_EXTENSIONS: dict[str, dict[str, tuple[str, ...]]] = {
    "media": {
        "disk":  ("dmg", "iso", "toast", "vcd"),
        "audio": ("aif", "cda", "mid", "midi", "mp3", "mpa", "ogg", "wav", "wma", "wpl"),
    },
    "server": {
        "compressed":  ("7z", "arj", "deb", "pkg", "rar", "rpm", "gz", "z", "zip"),
        "executable":  ("apk", "bat", "bin", "exe", "gadget", "jar", "wsf"),
        "system":      ("bak", "cab", "cfg", "cpl", "cur", "dll", "dmp", "drv", "icns", "ini",
                        "lnk", "msi", "sys", "tmp"),
        "database":    ("csv", "dat", "db", "dbf", "log", "mdb", "sav", "sql", "tar", "xml"),
        "programming": ("c", "class", "cpp", "cs", "h", "java", "sh", "swift", "vb"),
    },
    "internet": {
        "webpage": ("asp", "aspx", "cer", "cfm", "html", "htm", "jsp", "part", "php", "rss", "xhtml"),
        "script":  ("js", "json", "cgi", "pl", "py"),
        "style":   ("css",),
    },
    "graphics": {
        "font":  ("fnt", "fon", "otf", "ttf"),
        "img":   ("ai", "bmp", "gif", "ico", "jpeg", "jpg", "png", "ps", "psd", "svg", "tif", "tiff"),
        "video": ("3g2", "3gp", "avi", "flv", "h264", "m4v", "mkv", "mov", "mp4", "mpg", "mpeg",
                  "rm", "swf", "vob", "wmv"),
    },
    "display": {
        "presentation": ("key", "odp", "pps", "ppt", "pptx"),
        "spreadsheet":  ("ods", "xlr", "xls", "xlsx"),
        "text":         ("doc", "docx", "odt", "pdf", "rtf", "tex", "txt", "wks", "wps", "wpd"),
    },
}


class ExtensionTaxonomy:
    """Read-only category -> subcategory -> extensions lookup."""

    def __init__(self, table: Mapping[str, Mapping[str, tuple[str, ...]]]):
        self._table = MappingProxyType({
            category: MappingProxyType({
                subcategory: frozenset(extensions)
                for subcategory, extensions in subcategories.items()
            })
            for category, subcategories in table.items()
        })
        self._extensions = frozenset(
            ext for subcategories in self._table.values()
            for extensions in subcategories.values()
            for ext in extensions
        )
        self._longest = max((len(ext) for ext in self._extensions), default=0)

    @property
    def categories(self) -> Mapping[str, Mapping[str, frozenset[str]]]:
        return self._table

    @property
    def extensions(self) -> frozenset[str]:
        """Every extension the table knows about."""
        return self._extensions

    @property
    def longest_extension(self) -> int:
        return self._longest

    def subcategory_of(self, extension: str) -> str | None:
        """Return the first subcategory listing ``extension``, or None."""
        for subcategories in self._table.values():
            for subcategory, extensions in subcategories.items():
                if extension in extensions:
                    return subcategory
        return None

    def __contains__(self, extension: object) -> bool:
        return extension in self._extensions


DEFAULT_TAXONOMY = ExtensionTaxonomy(_FILE_EXTENSIONS)
