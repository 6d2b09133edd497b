"""Closed value sets for enum-backed attributes.

Every attribute setter that validates against a closed set accepts either the
enum member or its string value. The catalogs for roles, ARIA names and
global attributes are representative subsets of the HTML vocabulary.
"""
from __future__ import annotations

from enum import Enum


class ButtonType(str, Enum):
    BUTTON = "button"
    RESET = "reset"
    SUBMIT = "submit"


class ButtonCommand(str, Enum):
    CLOSE = "close"
    HIDE_POPOVER = "hide-popover"
    REQUEST_CLOSE = "request-close"
    SHOW_MODAL = "show-modal"
    SHOW_POPOVER = "show-popover"
    TOGGLE_POPOVER = "toggle-popover"


class Capture(str, Enum):
    ENVIRONMENT = "environment"
    USER = "user"


class Colorspace(str, Enum):
    DISPLAY_P3 = "display-p3"
    LIMITED_SRGB = "limited-srgb"


class Enctype(str, Enum):
    APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    TEXT_PLAIN = "text/plain"


class Method(str, Enum):
    DIALOG = "dialog"
    GET = "get"
    POST = "post"


class Wrap(str, Enum):
    HARD = "hard"
    OFF = "off"
    SOFT = "soft"


class InputType(str, Enum):
    CHECKBOX = "checkbox"
    COLOR = "color"
    DATE = "date"
    DATETIME_LOCAL = "datetime-local"
    EMAIL = "email"
    FILE = "file"
    HIDDEN = "hidden"
    IMAGE = "image"
    MONTH = "month"
    NUMBER = "number"
    PASSWORD = "password"
    RADIO = "radio"
    RANGE = "range"
    RESET = "reset"
    SEARCH = "search"
    SUBMIT = "submit"
    TEL = "tel"
    TEXT = "text"
    TIME = "time"
    URL = "url"
    WEEK = "week"


class Autocapitalize(str, Enum):
    CHARACTERS = "characters"
    NONE = "none"
    OFF = "off"
    ON = "on"
    SENTENCES = "sentences"
    WORDS = "words"


class Autocomplete(str, Enum):
    OFF = "off"
    ON = "on"


class Autocorrect(str, Enum):
    OFF = "off"
    ON = "on"


class ContentEditable(str, Enum):
    FALSE = "false"
    PLAINTEXT_ONLY = "plaintext-only"
    TRUE = "true"


class Direction(str, Enum):
    AUTO = "auto"
    LTR = "ltr"
    RTL = "rtl"


class PopoverTargetAction(str, Enum):
    HIDE = "hide"
    SHOW = "show"
    TOGGLE = "toggle"


class Target(str, Enum):
    BLANK = "_blank"
    PARENT = "_parent"
    SELF = "_self"
    TOP = "_top"


class Translate(str, Enum):
    NO = "no"
    YES = "yes"


class Role(str, Enum):
    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    BANNER = "banner"
    BUTTON = "button"
    CELL = "cell"
    CHECKBOX = "checkbox"
    COLUMNHEADER = "columnheader"
    COMBOBOX = "combobox"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DIALOG = "dialog"
    DOCUMENT = "document"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    METER = "meter"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    SWITCH = "switch"
    TAB = "tab"
    TABLE = "table"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"


class Aria(str, Enum):
    """ARIA attribute names without the `aria-` prefix."""

    CONTROLS = "controls"
    CURRENT = "current"
    DESCRIBEDBY = "describedby"
    DISABLED = "disabled"
    EXPANDED = "expanded"
    HIDDEN = "hidden"
    INVALID = "invalid"
    LABEL = "label"
    LABELLEDBY = "labelledby"
    LIVE = "live"
    PRESSED = "pressed"
    REQUIRED = "required"


class GlobalAttribute(str, Enum):
    ACCESSKEY = "accesskey"
    AUTOCAPITALIZE = "autocapitalize"
    AUTOCORRECT = "autocorrect"
    AUTOFOCUS = "autofocus"
    CLASS = "class"
    CONTENTEDITABLE = "contenteditable"
    DIR = "dir"
    DRAGGABLE = "draggable"
    HIDDEN = "hidden"
    ID = "id"
    LANG = "lang"
    ROLE = "role"
    SPELLCHECK = "spellcheck"
    STYLE = "style"
    TABINDEX = "tabindex"
    TITLE = "title"
    TRANSLATE = "translate"
