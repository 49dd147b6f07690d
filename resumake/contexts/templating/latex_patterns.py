"""
LaTeX Pattern Constants

Awesome-CV macro names, arities and fixed strings used for generation.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass
from typing import Dict, List

from resumake.utils.latex_tools import LatexMacro


@dataclass(frozen=True)
class DocumentPatterns:
    """
    Document-level LaTeX patterns.

    WHITESPACE is the placeholder line emitted right before END_DOCUMENT.
    """
    BEGIN_DOCUMENT: str = r'\begin{document}'
    END_DOCUMENT: str = r'\end{document}'
    WHITESPACE: str = ' '


@dataclass(frozen=True)
class EntryMacros:
    """
    Awesome-CV entry macros and their fixed arities.

    \\cventry{position}{title}{location}{date}{description}
    \\cvhonor{award}{event}{location}{date}
    """
    CVENTRY: LatexMacro = LatexMacro('cventry', 5)
    CVHONOR: LatexMacro = LatexMacro('cvhonor', 4)


@dataclass(frozen=True)
class EnvironmentNames:
    """Awesome-CV and standard environments used inside sections."""
    CVENTRIES: str = 'cventries'
    CVITEMS: str = 'cvitems'
    CVHONORS: str = 'cvhonors'
    CENTER: str = 'center'
    TABULAR: str = 'tabular'


@dataclass(frozen=True)
class HeaderNamePatterns:
    """Name styling macros used in the profile block."""
    FIRST_NAME_STYLE: str = 'headerfirstnamestyle'
    LAST_NAME_STYLE: str = 'headerlastnamestyle'
    LINE_BREAK: str = r'\\'


@dataclass(frozen=True)
class SkillPatterns:
    """Skills table layout."""
    SKILL_STYLE: str = 'skill'
    ARRAYSTRETCH: str = '1.15'
    COLUMN_SPEC: str = ' l l '
    ROW_END: str = r'\\'


class ContactFieldPatterns:
    """
    Contact line fields, in output order, with their FontAwesome icons.
    """
    FIELDS: List[str] = ['email', 'phone', 'address', 'website']

    ICONS: Dict[str, str] = {
        'email': r'\faEnvelope',
        'phone': r'\faMobile',
        'address': r'\faMapMarker',
        'website': r'\faLink',
    }

    SEPARATOR: str = ' | '


@dataclass(frozen=True)
class DateRangePatterns:
    """Date range formatting."""
    SEPARATOR: str = ' – '
    PRESENT: str = 'Present'
