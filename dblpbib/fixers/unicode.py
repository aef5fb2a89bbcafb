r"""Unicode to LaTeX transliteration.

BibTeX output is restricted to ASCII. Every non-ASCII character is replaced by
the LaTeX sequence producing it and wrapped in braces so that BibTeX treats it
as a single letter (`Järvisalo` -> `J{\"a}rvisalo`).

The table is derived from the latexcodec/pylatexenc unicode map. It is built
once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


class UnmappedCharacterError(ValueError):
    """A non-ASCII character has no LaTeX equivalent in the table."""

    def __init__(self, char: str, text: str, *, key: Optional[str] = None):
        where = f" of `{key}`" if key else ""
        super().__init__(
            f"No LaTeX transliteration for {char!r} (U+{ord(char):04X}) in {text!r}{where}"
        )
        self.char = char
        self.text = text
        self.key = key


UNICODE_TO_LATEX: Mapping[int, str] = MappingProxyType({
    0x00A0: r"~",
    0x00A1: r"\textexclamdown",
    0x00A2: r"\textcent",
    0x00A3: r"\textsterling",
    0x00A4: r"\textcurrency",
    0x00A5: r"\textyen",
    0x00A6: r"\textbrokenbar",
    0x00A7: r"\textsection",
    0x00A8: r"\textasciidieresis",
    0x00A9: r"\textcopyright",
    0x00AA: r"\textordfeminine",
    0x00AB: r"\guillemotleft",
    0x00AC: r"\textlnot",
    0x00AD: r"\-",
    0x00AE: r"\textregistered",
    0x00AF: r"\textasciimacron",
    0x00B0: r"\textdegree",
    0x00B1: r"\ensuremath{\pm}",
    0x00B2: r"\texttwosuperior",
    0x00B3: r"\textthreesuperior",
    0x00B4: r"\textasciiacute",
    0x00B5: r"\textmu",
    0x00B6: r"\textparagraph",
    0x00B7: r"\textperiodcentered",
    0x00B9: r"\textonesuperior",
    0x00BA: r"\textordmasculine",
    0x00BB: r"\guillemotright",
    0x00BC: r"\textonequarter",
    0x00BD: r"\textonehalf",
    0x00BE: r"\textthreequarters",
    0x00BF: r"\textquestiondown",
    0x00C0: r"\`A",
    0x00C1: r"\'A",
    0x00C2: r"\^A",
    0x00C3: r"\~A",
    0x00C4: r'\"A',
    0x00C5: r"\r{A}",
    0x00C6: r"\AE",
    0x00C7: r"\c{C}",
    0x00C8: r"\`E",
    0x00C9: r"\'E",
    0x00CA: r"\^E",
    0x00CB: r'\"E',
    0x00CC: r"\`I",
    0x00CD: r"\'I",
    0x00CE: r"\^I",
    0x00CF: r'\"I',
    0x00D0: r"\DH",
    0x00D1: r"\~N",
    0x00D2: r"\`O",
    0x00D3: r"\'O",
    0x00D4: r"\^O",
    0x00D5: r"\~O",
    0x00D6: r'\"O',
    0x00D7: r"\texttimes",
    0x00D8: r"\O",
    0x00D9: r"\`U",
    0x00DA: r"\'U",
    0x00DB: r"\^U",
    0x00DC: r'\"U',
    0x00DD: r"\'Y",
    0x00DE: r"\TH",
    0x00DF: r"\ss",
    0x00E0: r"\`a",
    0x00E1: r"\'a",
    0x00E2: r"\^a",
    0x00E3: r"\~a",
    0x00E4: r'\"a',
    0x00E5: r"\r{a}",
    0x00E6: r"\ae",
    0x00E7: r"\c{c}",
    0x00E8: r"\`e",
    0x00E9: r"\'e",
    0x00EA: r"\^e",
    0x00EB: r'\"e',
    0x00EC: r"\`i",
    0x00ED: r"\'i",
    0x00EE: r"\^i",
    0x00EF: r'\"i',
    0x00F0: r"\dh",
    0x00F1: r"\~n",
    0x00F2: r"\`o",
    0x00F3: r"\'o",
    0x00F4: r"\^o",
    0x00F5: r"\~o",
    0x00F6: r'\"o',
    0x00F7: r"\textdiv",
    0x00F8: r"\o",
    0x00F9: r"\`u",
    0x00FA: r"\'u",
    0x00FB: r"\^u",
    0x00FC: r'\"u',
    0x00FD: r"\'y",
    0x00FE: r"\th",
    0x00FF: r'\"y',
    0x0100: r"\={A}",
    0x0101: r"\={a}",
    0x0102: r"\u{A}",
    0x0103: r"\u{a}",
    0x0104: r"\k{A}",
    0x0105: r"\k{a}",
    0x0106: r"\'C",
    0x0107: r"\'c",
    0x0108: r"\^{C}",
    0x0109: r"\^{c}",
    0x010A: r"\.{C}",
    0x010B: r"\.{c}",
    0x010C: r"\v{C}",
    0x010D: r"\v{c}",
    0x010E: r"\v{D}",
    0x010F: r"\v{d}",
    0x0110: r"\DJ",
    0x0111: r"\dj",
    0x0112: r"\={E}",
    0x0113: r"\={e}",
    0x0114: r"\u{E}",
    0x0115: r"\u{e}",
    0x0116: r"\.{E}",
    0x0117: r"\.{e}",
    0x0118: r"\k{E}",
    0x0119: r"\k{e}",
    0x011A: r"\v{E}",
    0x011B: r"\v{e}",
    0x011C: r"\^{G}",
    0x011D: r"\^{g}",
    0x011E: r"\u{G}",
    0x011F: r"\u{g}",
    0x0120: r"\.{G}",
    0x0121: r"\.{g}",
    0x0122: r"\c{G}",
    0x0123: r"\c{g}",
    0x0124: r"\^{H}",
    0x0125: r"\^{h}",
    0x0126: r"\={H}",
    0x0127: r"\={h}",
    0x0128: r"\~{I}",
    0x0129: r"\~{i}",
    0x012A: r"\={I}",
    0x012B: r"\={i}",
    0x012C: r"\u{I}",
    0x012D: r"\u{i}",
    0x012E: r"\k{I}",
    0x012F: r"\k{i}",
    0x0130: r"\.I",
    0x0131: r"\i",
    0x0132: r"\IJ",
    0x0133: r"\ij",
    0x0134: r"\^{J}",
    0x0135: r"\^{j}",
    0x0136: r"\c{K}",
    0x0137: r"\c{k}",
    0x0138: r"\textsc{k}",
    0x0139: r"\'L",
    0x013A: r"\'l",
    0x013B: r"\c{L}",
    0x013C: r"\c{l}",
    0x013D: r"\v{L}",
    0x013E: r"\v{l}",
    0x013F: r"\.{L}",
    0x0140: r"\.{l}",
    0x0141: r"\L",
    0x0142: r"\l",
    0x0143: r"\'N",
    0x0144: r"\'n",
    0x0145: r"\c{N}",
    0x0146: r"\c{n}",
    0x0147: r"\v{N}",
    0x0148: r"\v{n}",
    0x0149: r"\nument{149}",
    0x014A: r"\NG",
    0x014B: r"\ng",
    0x014C: r"\={O}",
    0x014D: r"\={o}",
    0x014E: r"\u{O}",
    0x014F: r"\u{o}",
    0x0150: r"\H{O}",
    0x0151: r"\H{o}",
    0x0152: r"\OE",
    0x0153: r"\oe",
    0x0154: r"\'R",
    0x0155: r"\'r",
    0x0156: r"\c{R}",
    0x0157: r"\c{r}",
    0x0158: r"\v{R}",
    0x0159: r"\v{r}",
    0x015A: r"\'S",
    0x015B: r"\'s",
    0x015C: r"\^{S}",
    0x015D: r"\^{s}",
    0x015E: r"\c{S}",
    0x015F: r"\c{s}",
    0x0160: r"\v{S}",
    0x0161: r"\v{s}",
    0x0162: r"\c{T}",
    0x0163: r"\c{t}",
    0x0164: r"\v{T}",
    0x0165: r"\v{t}",
    0x0166: r"\={T}",
    0x0167: r"\={t}",
    0x0168: r"\~{U}",
    0x0169: r"\~{u}",
    0x016A: r"\={U}",
    0x016B: r"\={u}",
    0x016C: r"\u{U}",
    0x016D: r"\u{u}",
    0x016E: r"\r{U}",
    0x016F: r"\r{u}",
    0x0170: r"\'{U}",
    0x0171: r"\'{u}",
    0x0172: r"\k{U}",
    0x0173: r"\k{u}",
    0x0174: r"\^{W}",
    0x0175: r"\^{w}",
    0x0176: r"\^{Y}",
    0x0177: r"\^{y}",
    0x0178: r'\"Y',
    0x0179: r"\'Z",
    0x017A: r"\'z",
    0x017B: r"\.Z",
    0x017C: r"\.z",
    0x017D: r"\v{Z}",
    0x017E: r"\v{z}",
    0x0192: r"\textflorin",
    0x0195: r"\texthvlig",
    0x019E: r"\textnrleg",
    0x01E7: r"\v{g}",
    0x01F5: r"\'{g}",
    0x0228: r"\c{E}",
    0x0229: r"\c{e}",
    0x0259: r"\textschwa",
    0x025B: r"\varepsilon",
    0x0278: r"\textphi",
    0x0294: r"\textglotstop",
    0x029E: r"\textturnk",
    0x02B7: r"\textsuperscript{w}",
    0x02C6: r"\textasciicircum",
    0x02C7: r"\textasciicaron",
    0x02D8: r"\textasciibreve",
    0x02D9: r"\textperiodcentered",
    0x02DA: r"\r{}",
    0x02DB: r"\k{}",
    0x02DC: r"\textasciitilde",
    0x02DD: r"\textacutedbl",
    0x02BC: r"'",
    0x0307: r"\ensuremath{\dot{}}",
    0x0308: r"\ensuremath{\ddot{}}",
    0x0386: r"\'{}A",
    0x0388: r"\'{}E",
    0x0389: r"\'{}H",
    0x038A: r"\'{}I",
    0x038C: r"\'{}O",
    0x038E: r"\'{}Y",
    0x038F: r"\'{}\ensuremath{\Omega}",
    0x0390: r"\acute{\ddot{\iota}}",
    0x0391: r"A",
    0x0392: r"B",
    0x0393: r"\ensuremath{\Gamma}",
    0x0394: r"\ensuremath{\Delta}",
    0x0395: r"E",
    0x0396: r"Z",
    0x0397: r"H",
    0x0398: r"\ensuremath{\Theta}",
    0x0399: r"I",
    0x039A: r"K",
    0x039B: r"\ensuremath{\Lambda}",
    0x039C: r"M",
    0x039D: r"N",
    0x039E: r"\ensuremath{\Xi}",
    0x039F: r"O",
    0x03A0: r"\ensuremath{\Pi}",
    0x03A1: r"P",
    0x03A3: r"\ensuremath{\Sigma}",
    0x03A4: r"T",
    0x03A5: r"\ensuremath{\Upsilon}",
    0x03A6: r"\ensuremath{\Phi}",
    0x03A7: r"X",
    0x03A8: r"\ensuremath{\Psi}",
    0x03A9: r"\ensuremath{\Omega}",
    0x03AA: r"\ensuremath{\ddot{I}}",
    0x03AB: r"\ensuremath{\ddot{Y}}",
    0x03AC: r"\ensuremath{\acute\alpha}",
    0x03AD: r"\ensuremath{\acute\epsilon}",
    0x03AE: r"\ensuremath{\acute\eta}",
    0x03AF: r"\ensuremath{\acute\iota}",
    0x03B0: r"\ensuremath{\acute{\ddot{\upsilon}}}",
    0x03CA: r"\ensuremath{\ddot\iota}",
    0x03CB: r"\ensuremath{\ddot{\upsilon}}",
    0x03CC: r"\'{o}",
    0x03CD: r"\ensuremath{\acute\upsilon}",
    0x03CE: r"\ensuremath{\acute\omega}",
    0x03B1: r"\ensuremath{\alpha}",
    0x03B2: r"\ensuremath{\beta}",
    0x03B3: r"\ensuremath{\gamma}",
    0x03B4: r"\ensuremath{\delta}",
    0x03B5: r"\ensuremath{\varepsilon}",
    0x03B6: r"\ensuremath{\zeta}",
    0x03B7: r"\ensuremath{\eta}",
    0x03B8: r"\ensuremath{\theta}",
    0x03B9: r"\ensuremath{\iota}",
    0x03BA: r"\ensuremath{\kappa}",
    0x03BB: r"\ensuremath{\lambda}",
    0x03BC: r"\ensuremath{\mu}",
    0x03BD: r"\ensuremath{\nu}",
    0x03BE: r"\ensuremath{\xi}",
    0x03BF: r"o",
    0x03C0: r"\ensuremath{\pi}",
    0x03C1: r"\ensuremath{\rho}",
    0x03C2: r"\ensuremath{\varsigma}",
    0x03C3: r"\ensuremath{\sigma}",
    0x03C4: r"\ensuremath{\tau}",
    0x03C5: r"\ensuremath{\upsilon}",
    0x03C6: r"\ensuremath{\varphi}",
    0x03C7: r"\ensuremath{\chi}",
    0x03C8: r"\ensuremath{\psi}",
    0x03C9: r"\ensuremath{\omega}",
    0x03D1: r"\ensuremath{\vartheta}",
    0x03D2: r"\Upsilon",
    0x03D5: r"\ensuremath{\phi}",
    0x03D6: r"\ensuremath{\varpi}",
    0x03F0: r"\ensuremath{\varkappa}",
    0x03F1: r"\ensuremath{\varrho}",
    0x03F5: r"\ensuremath{\epsilon}",
    0x03F6: r"\ensuremath{\backepsilon}",
    0x0400: r"\`\CYRE",
    0x0401: r"\CYRYO",
    0x0402: r"\CYRDJE",
    0x0403: r"\`\CYRG",
    0x0404: r"\CYRIE",
    0x0405: r"\CYRDZE",
    0x0406: r"\CYRII",
    0x0407: r"\CYRYI",
    0x0408: r"\CYRJE",
    0x0409: r"\CYRLJE",
    0x040A: r"\CYRNJE",
    0x040B: r"\CYRTSHE",
    0x040C: r"\`\CYRK",
    0x040D: r"\`\CYRI",
    0x040E: r"\CYRUSHRT",
    0x040F: r"\CYRDZHE",
    0x0410: r"\CYRA",
    0x0411: r"\CYRB",
    0x0412: r"\CYRV",
    0x0413: r"\CYRG",
    0x0414: r"\CYRD",
    0x0415: r"\CYRE",
    0x0416: r"\CYRZH",
    0x0417: r"\CYRZ",
    0x0418: r"\CYRI",
    0x0419: r"\CYRISHRT",
    0x041A: r"\CYRK",
    0x041B: r"\CYRL",
    0x041C: r"\CYRM",
    0x041D: r"\CYRN",
    0x041E: r"\CYRO",
    0x041F: r"\CYRP",
    0x0420: r"\CYRR",
    0x0421: r"\CYRS",
    0x0422: r"\CYRT",
    0x0423: r"\CYRU",
    0x0424: r"\CYRF",
    0x0425: r"\CYRH",
    0x0426: r"\CYRC",
    0x0427: r"\CYRCH",
    0x0428: r"\CYRSH",
    0x0429: r"\CYRSHCH",
    0x042A: r"\CYRHRDSN",
    0x042B: r"\CYRERY",
    0x042C: r"\CYRSFTSN",
    0x042D: r"\CYREREV",
    0x042E: r"\CYRYU",
    0x042F: r"\CYRYA",
    0x0430: r"\cyra",
    0x0431: r"\cyrb",
    0x0432: r"\cyrv",
    0x0433: r"\cyrg",
    0x0434: r"\cyrd",
    0x0435: r"\cyre",
    0x0436: r"\cyrzh",
    0x0437: r"\cyrz",
    0x0438: r"\cyri",
    0x0439: r"\cyrishrt",
    0x043A: r"\cyrk",
    0x043B: r"\cyrl",
    0x043C: r"\cyrm",
    0x043D: r"\cyrn",
    0x043E: r"\cyro",
    0x043F: r"\cyrp",
    0x0440: r"\cyrr",
    0x0441: r"\cyrs",
    0x0442: r"\cyrt",
    0x0443: r"\cyru",
    0x0444: r"\cyrf",
    0x0445: r"\cyrh",
    0x0446: r"\cyrc",
    0x0447: r"\cyrch",
    0x0448: r"\cyrsh",
    0x0449: r"\cyrshch",
    0x044A: r"\cyrhrdsn",
    0x044B: r"\cyrery",
    0x044C: r"\cyrsftsn",
    0x044D: r"\cyrerev",
    0x044E: r"\cyryu",
    0x044F: r"\cyrya",
    0x0450: r"\`\cyre",
    0x0451: r"\cyryo",
    0x0452: r"\cyrdje",
    0x0453: r"\`\cyrg",
    0x0454: r"\cyrie",
    0x0455: r"\cyrdze",
    0x0456: r"\cyrii",
    0x0457: r"\cyryi",
    0x0458: r"\cyrje",
    0x0459: r"\cyrlje",
    0x045A: r"\cyrnje",
    0x045B: r"\cyrtshe",
    0x045C: r"\`\cyrk",
    0x045D: r"\`\cyri",
    0x045E: r"\cyrushrt",
    0x045F: r"\cyrdzhe",
    0x0460: r"\cyrchar\CYROMEGA",
    0x0461: r"\cyrchar\cyromega",
    0x0462: r"\CYRYAT",
    0x0463: r"\cyryat",
    0x0464: r"\cyrchar\CYRIOTE",
    0x0465: r"\cyrchar\cyriote",
    0x0466: r"\cyrchar\CYRLYUS",
    0x0467: r"\cyrchar\cyrlyus",
    0x0468: r"\cyrchar\CYRIOTLYUS",
    0x0469: r"\cyrchar\cyriotlyus",
    0x046A: r"\CYRBYUS",
    0x046B: r"\cyrbyus",
    0x046C: r"\cyrchar\CYRIOTBYUS",
    0x046D: r"\cyrchar\cyriotbyus",
    0x046E: r"\cyrchar\CYRKSI",
    0x046F: r"\cyrchar\cyrksi",
    0x0470: r"\cyrchar\CYRPSI",
    0x0471: r"\cyrchar\cyrpsi",
    0x0472: r"\CYRFITA",
    0x0473: r"\cyrfita",
    0x0474: r"\CYRIZH",
    0x0475: r"\cyrizh",
    0x0476: r"\C\CYRIZH",
    0x0477: r"\C\cyrizh",
    0x0478: r"\cyrchar\CYRUK",
    0x0479: r"\cyrchar\cyruk",
    0x047A: r"\cyrchar\CYROMEGARND",
    0x047B: r"\cyrchar\cyromegarnd",
    0x047C: r"\cyrchar\CYROMEGATITLO",
    0x047D: r"\cyrchar\cyromegatitlo",
    0x047E: r"\cyrchar\CYROT",
    0x047F: r"\cyrchar\cyrot",
    0x0480: r"\cyrchar\CYRKOPPA",
    0x0481: r"\cyrchar\cyrkoppa",
    0x0482: r"\cyrchar\cyrthousands",
    0x0488: r"\cyrchar\cyrhundredthousands",
    0x0489: r"\cyrchar\cyrmillions",
    0x048C: r"\CYRSEMISFTSN",
    0x048D: r"\cyrsemisftsn",
    0x048E: r"\CYRRTICK",
    0x048F: r"\cyrrtick",
    0x0490: r"\CYRGUP",
    0x0491: r"\cyrgup",
    0x0492: r"\CYRGHCRS",
    0x0493: r"\cyrghcrs",
    0x0494: r"\CYRGHK",
    0x0495: r"\cyrghk",
    0x0496: r"\CYRZHDSC",
    0x0497: r"\cyrzhdsc",
    0x0498: r"\CYRZDSC",
    0x0499: r"\cyrzdsc",
    0x049A: r"\CYRKDSC",
    0x049B: r"\cyrkdsc",
    0x049C: r"\CYRKVCRS",
    0x049D: r"\cyrkvcrs",
    0x049E: r"\CYRKHCRS",
    0x049F: r"\cyrkhcrs",
    0x04A0: r"\CYRKBEAK",
    0x04A1: r"\cyrkbeak",
    0x04A2: r"\CYRNDSC",
    0x04A3: r"\cyrndsc",
    0x04A4: r"\CYRNG",
    0x04A5: r"\cyrng",
    0x04A6: r"\CYRPHK",
    0x04A7: r"\cyrphk",
    0x04A8: r"\CYRABHHA",
    0x04A9: r"\cyrabhha",
    0x04AA: r"\CYRSDSC",
    0x04AB: r"\cyrsdsc",
    0x04AC: r"\CYRTDSC",
    0x04AD: r"\cyrtdsc",
    0x04AE: r"\CYRY",
    0x04AF: r"\cyry",
    0x04B0: r"\CYRYHCRS",
    0x04B1: r"\cyryhcrs",
    0x04B2: r"\CYRHDSC",
    0x04B3: r"\cyrhdsc",
    0x04B4: r"\CYRTETSE",
    0x04B5: r"\cyrtetse",
    0x04B6: r"\CYRCHRDSC",
    0x04B7: r"\cyrchrdsc",
    0x04B8: r"\CYRCHVCRS",
    0x04B9: r"\cyrchvcrs",
    0x04BA: r"\CYRSHHA",
    0x04BB: r"\cyrshha",
    0x04BC: r"\CYRABHCH",
    0x04BD: r"\cyrabhch",
    0x04BE: r"\CYRABHCHDSC",
    0x04BF: r"\cyrabhchdsc",
    0x04C0: r"\CYRpalochka",
    0x04C1: r"\U\CYRZH",
    0x04C2: r"\U\cyrzh",
    0x04C3: r"\CYRKHK",
    0x04C4: r"\cyrkhk",
    0x04C5: r"\CYRLDSC",
    0x04C6: r"\cyrldsc",
    0x04C7: r"\CYRNHK",
    0x04C8: r"\cyrnhk",
    0x04CB: r"\CYRCHLDSC",
    0x04CC: r"\cyrchldsc",
    0x04CD: r"\CYRMDSC",
    0x04CE: r"\cyrmdsc",
    0x04D0: r"\U\CYRA",
    0x04D1: r"\U\cyra",
    0x04D2: r'\"\CYRA',
    0x04D3: r'\"\cyra',
    0x04D4: r"\CYRAE",
    0x04D5: r"\cyrae",
    0x04D6: r"\U\CYRE",
    0x04D7: r"\U\cyre",
    0x04D8: r"\CYRSCHWA",
    0x04D9: r"\cyrschwa",
    0x04DA: r'\"\CYRSCHWA',
    0x04DB: r'\"\cyrschwa',
    0x04DC: r'\"\CYRZH',
    0x04DD: r'\"\cyrzh',
    0x04DE: r'\"\CYRZ',
    0x04DF: r'\"\cyrz',
    0x04E0: r"\CYRABHDZE",
    0x04E1: r"\cyrabhdze",
    0x04E2: r"\=\CYRI",
    0x04E3: r"\=\cyri",
    0x04E4: r'\"\CYRI',
    0x04E5: r'\"\cyri',
    0x04E6: r'\"\CYRO',
    0x04E7: r'\"\cyro',
    0x04E8: r"\CYROTLD",
    0x04E9: r"\cyrotld",
    0x04EC: r'\"\CYREREV',
    0x04ED: r'\"\cyrerev',
    0x04EE: r"\=\CYRU",
    0x04EF: r"\=\cyru",
    0x04F0: r'\"\CYRU',
    0x04F1: r'\"\cyru',
    0x04F2: r"\H\CYRU",
    0x04F3: r"\H\cyru",
    0x04F4: r'\"\CYRCH',
    0x04F5: r'\"\cyrch',
    0x04F6: r"\CYRGDSC",
    0x04F7: r"\cyrgdsc",
    0x04F8: r'\"\CYRERY',
    0x04F9: r'\"\cyrery',
    0x04FA: r"\CYRGDSCHCRS",
    0x04FB: r"\cyrgdschcrs",
    0x04FC: r"\CYRHHK",
    0x04FD: r"\cyrhhk",
    0x04FE: r"\CYRHHCRS",
    0x04FF: r"\cyrhhcrs",
    0x0E3F: r"\textbaht",
    0x2000: r"\enskip",
    0x2001: r"\quad",
    0x2002: r"\enskip",
    0x2003: r"\quad",
    0x2004: r"\hspace{0.33em}",
    0x2005: r"\hspace{0.25em}",
    0x2006: r"\hspace{0.167em}",
    0x2007: r"~",
    0x2008: r"\;",
    0x2009: r"\,",
    0x200A: r"\hspace{1pt}",
    0x200C: r"\textcompwordmark",
    0x2010: r"-",
    0x2011: r"\nobreakdash-",
    0x2012: r"-",
    0x2013: r"\textendash",
    0x2014: r"\textemdash",
    0x2015: r"\textemdash",
    0x2016: r"\ensuremath{\Vert}",
    0x2018: r"\textquoteleft",
    0x2019: r"\textquoteright",
    0x201A: r"\quotesinglbase",
    0x201C: r"\textquotedblleft",
    0x201D: r"\textquotedblright",
    0x201E: r"\quotedblbase",
    0x2020: r"\textdagger",
    0x2021: r"\textdaggerdbl",
    0x2022: r"\textbullet",
    0x2024: r".",
    0x2025: r"..",
    0x2026: r"\textellipsis",
    0x2030: r"\textperthousand",
    0x2031: r"\textpertenthousand",
    0x2032: r"'",
    0x2033: r"''",
    0x2034: r"'''",
    0x2035: r"\ensuremath{\backprime}",
    0x2039: r"\guilsinglleft",
    0x203A: r"\guilsinglright",
    0x203B: r"\textreferencemark",
    0x203D: r"\textinterrobang",
    0x2044: r"\textfractionsolidus",
    0x204E: r"\textasteriskcentered",
    0x2052: r"\textdiscount",
    0x2057: r"''''",
    0x205F: r"\hspace{0.22em}",
    0x2060: r"\nolinebreak",
    0x2061: r"",
    0x20A1: r"\textcolonmonetary",
    0x20A4: r"\textlira",
    0x20A6: r"\textnaira",
    0x20A9: r"\textwon",
    0x20AB: r"\textdong",
    0x20AC: r"\texteuro",
    0x20B1: r"\textpeso",
    0x2102: r"\ensuremath{\mathbb{C}}",
    0x2103: r"\textcelsius",
    0x2109: r"\ensuremath{^\circ}F",
    0x210A: r"\ensuremath{g}",
    0x210B: r"\ensuremath{\mathscr{H}}",
    0x210C: r"\ensuremath{\mathfrak{H}}",
    0x210D: r"\ensuremath{\mathbb{H}}",
    0x210E: r"\ensuremath{h}",
    0x210F: r"\ensuremath{\hbar}",
    0x2110: r"\ensuremath{\mathscr{I}}",
    0x2111: r"\ensuremath{\mathfrak{I}}",
    0x2112: r"\ensuremath{\mathscr{L}}",
    0x2113: r"\ensuremath{\ell}",
    0x2115: r"\ensuremath{\mathbb{N}}",
    0x2116: r"\textnumero",
    0x2117: r"\textcircledP",
    0x2118: r"\ensuremath{\wp}",
    0x211E: r"\textrecipe",
    0x2119: r"\ensuremath{\mathbb{P}}",
    0x211A: r"\ensuremath{\mathbb{Q}}",
    0x211B: r"\ensuremath{\mathscr{R}}",
    0x211C: r"\ensuremath{\mathfrak{R}}",
    0x211D: r"\ensuremath{\mathbb{R}}",
    0x2120: r"\textservicemark",
    0x2122: r"\texttrademark",
    0x2124: r"\ensuremath{\mathbb{Z}}",
    0x2126: r"\textohm",
    0x2127: r"\textmho",
    0x2128: r"\ensuremath{\mathfrak{Z}}",
    0x212A: r"K",
    0x212B: r"\r{A}",
    0x212C: r"\ensuremath{\mathscr{B}}",
    0x212D: r"\ensuremath{\mathfrak{C}}",
    0x212E: r"\textestimated",
    0x212F: r"\ensuremath{e}",
    0x2130: r"\ensuremath{\mathscr{E}}",
    0x2131: r"\ensuremath{\mathscr{F}}",
    0x2133: r"\ensuremath{\mathscr{M}}",
    0x2134: r"\ensuremath{o}",
    0x2135: r"\ensuremath{\aleph}",
    0x2136: r"\ensuremath{\beth}",
    0x2137: r"\ensuremath{\gimel}",
    0x2138: r"\ensuremath{\daleth}",
    0x2153: r"\textfrac{1}{3}",
    0x2154: r"\textfrac{2}{3}",
    0x2155: r"\textfrac{1}{5}",
    0x2156: r"\textfrac{2}{5}",
    0x2157: r"\textfrac{3}{5}",
    0x2158: r"\textfrac{4}{5}",
    0x2159: r"\textfrac{1}{6}",
    0x215A: r"\textfrac{5}{6}",
    0x215B: r"\textfrac{1}{8}",
    0x215C: r"\textfrac{3}{8}",
    0x215D: r"\textfrac{5}{8}",
    0x215E: r"\textfrac{7}{8}",
    0x2190: r"\textleftarrow",
    0x2191: r"\textuparrow",
    0x2192: r"\textrightarrow",
    0x2193: r"\textdownarrow",
    0x2194: r"\ensuremath{\leftrightarrow}",
    0x2195: r"\ensuremath{\updownarrow}",
    0x2196: r"\ensuremath{\nwarrow}",
    0x2197: r"\ensuremath{\nearrow}",
    0x2198: r"\ensuremath{\searrow}",
    0x2199: r"\ensuremath{\swarrow}",
    0x219A: r"\ensuremath{\nleftarrow}",
    0x219B: r"\ensuremath{\nrightarrow}",
    0x219C: r"\ensuremath{\arrowwaveleft}",
    0x219D: r"\ensuremath{\arrowwaveright}",
    0x219E: r"\ensuremath{\twoheadleftarrow}",
    0x21A0: r"\ensuremath{\twoheadrightarrow}",
    0x21A2: r"\ensuremath{\leftarrowtail}",
    0x21A3: r"\ensuremath{\rightarrowtail}",
    0x21A6: r"\ensuremath{\mapsto}",
    0x21A9: r"\ensuremath{\hookleftarrow}",
    0x21AA: r"\ensuremath{\hookrightarrow}",
    0x21AB: r"\ensuremath{\looparrowleft}",
    0x21AC: r"\ensuremath{\looparrowright}",
    0x21AD: r"\ensuremath{\leftrightsquigarrow}",
    0x21AE: r"\ensuremath{\nleftrightarrow}",
    0x21B0: r"\ensuremath{\Lsh}",
    0x21B1: r"\ensuremath{\Rsh}",
    0x21B6: r"\ensuremath{\curvearrowleft}",
    0x21B7: r"\ensuremath{\curvearrowright}",
    0x21BA: r"\ensuremath{\circlearrowleft}",
    0x21BB: r"\ensuremath{\circlearrowright}",
    0x21BC: r"\ensuremath{\leftharpoonup}",
    0x21BD: r"\ensuremath{\leftharpoondown}",
    0x21BE: r"\ensuremath{\upharpoonright}",
    0x21BF: r"\ensuremath{\upharpoonleft}",
    0x21C0: r"\ensuremath{\rightharpoonup}",
    0x21C1: r"\ensuremath{\rightharpoondown}",
    0x21C2: r"\ensuremath{\downharpoonright}",
    0x21C3: r"\ensuremath{\downharpoonleft}",
    0x21C4: r"\ensuremath{\rightleftarrows}",
    0x21C5: r"\ensuremath{\dblarrowupdown}",
    0x21C6: r"\ensuremath{\leftrightarrows}",
    0x21C7: r"\ensuremath{\leftleftarrows}",
    0x21C8: r"\ensuremath{\upuparrows}",
    0x21C9: r"\ensuremath{\rightrightarrows}",
    0x21CA: r"\ensuremath{\downdownarrows}",
    0x21CB: r"\ensuremath{\leftrightharpoons}",
    0x21CC: r"\ensuremath{\rightleftharpoons}",
    0x21CD: r"\ensuremath{\nLeftarrow}",
    0x21CE: r"\ensuremath{\nLeftrightarrow}",
    0x21CF: r"\ensuremath{\nRightarrow}",
    0x21D0: r"\ensuremath{\Leftarrow}",
    0x21D1: r"\ensuremath{\Uparrow}",
    0x21D2: r"\ensuremath{\Rightarrow}",
    0x21D3: r"\ensuremath{\Downarrow}",
    0x21D4: r"\ensuremath{\Leftrightarrow}",
    0x21D5: r"\ensuremath{\Updownarrow}",
    0x21DA: r"\ensuremath{\Lleftarrow}",
    0x21DB: r"\ensuremath{\Rrightarrow}",
    0x21DD: r"\ensuremath{\rightsquigarrow}",
    0x21F5: r"\ensuremath{\DownArrowUpArrow}",
    0x2200: r"\ensuremath{\forall}",
    0x2201: r"\ensuremath{\complement}",
    0x2202: r"\ensuremath{\partial}",
    0x2203: r"\ensuremath{\exists}",
    0x2204: r"\ensuremath{\nexists}",
    0x2205: r"\ensuremath{\varnothing}",
    0x2206: r"\ensuremath{\Delta}",
    0x2207: r"\ensuremath{\nabla}",
    0x2208: r"\ensuremath{\in}",
    0x2209: r"\ensuremath{\notin}",
    0x220A: r"\ensuremath{\in}",
    0x220B: r"\ensuremath{\ni}",
    0x220C: r"\ensuremath{\not\ni}",
    0x220D: r"\ensuremath{\ni}",
    0x220E: r"\ensuremath{\blacksquare}",
    0x220F: r"\ensuremath{\prod}",
    0x2210: r"\ensuremath{\coprod}",
    0x2211: r"\ensuremath{\sum}",
    0x2212: r"\ensuremath{-}",
    0x2213: r"\ensuremath{\mp}",
    0x2214: r"\ensuremath{\dotplus}",
    0x2215: r"\ensuremath{/}",
    0x2216: r"\ensuremath{\smallsetminus}",
    0x2217: r"\ensuremath{*}",
    0x2218: r"\ensuremath{\circ}",
    0x2219: r"\ensuremath{\bullet}",
    0x221A: r"\ensuremath{\sqrt{}}",
    0x221B: r"\ensuremath{\sqrt[3]{}}",
    0x221C: r"\ensuremath{\sqrt[4]{}}",
    0x221D: r"\ensuremath{\propto}",
    0x221E: r"\ensuremath{\infty}",
    0x221F: r"\ensuremath{\rightangle}",
    0x2220: r"\ensuremath{\angle}",
    0x2221: r"\ensuremath{\measuredangle}",
    0x2222: r"\ensuremath{\sphericalangle}",
    0x2223: r"\ensuremath{\mid}",
    0x2224: r"\ensuremath{\nmid}",
    0x2225: r"\ensuremath{\parallel}",
    0x2226: r"\ensuremath{\nparallel}",
    0x2227: r"\ensuremath{\wedge}",
    0x2228: r"\ensuremath{\vee}",
    0x2229: r"\ensuremath{\cap}",
    0x222A: r"\ensuremath{\cup}",
    0x222B: r"\ensuremath{\int}",
    0x222C: r"\ensuremath{\iint}",
    0x222D: r"\ensuremath{\iiint}",
    0x222E: r"\ensuremath{\oint}",
    0x222F: r"\ensuremath{\surfintegral}",
    0x2230: r"\ensuremath{\volintegral}",
    0x2231: r"\ensuremath{\clwintegral}",
    0x2234: r"\ensuremath{\therefore}",
    0x2235: r"\ensuremath{\because}",
    0x2236: r"\ensuremath{:}",
    0x2237: r"\ensuremath{::}",
    0x223A: r"\ensuremath{\mathbin{{:}\!\!{-}\!\!{:}}}",
    0x223B: r"\ensuremath{\homothetic}",
    0x223C: r"\ensuremath{\sim}",
    0x223D: r"\ensuremath{\backsim}",
    0x223E: r"\ensuremath{\lazysinv}",
    0x2240: r"\ensuremath{\wr}",
    0x2241: r"\ensuremath{\not\sim}",
    0x2243: r"\ensuremath{\simeq}",
    0x2244: r"\ensuremath{\not\simeq}",
    0x2245: r"\ensuremath{\cong}",
    0x2246: r"\ensuremath{\approxnotequal}",
    0x2247: r"\ensuremath{\not\cong}",
    0x2248: r"\ensuremath{\approx}",
    0x2249: r"\ensuremath{\not\approx}",
    0x224A: r"\ensuremath{\approxeq}",
    0x224B: r"\ensuremath{\tildetrpl}",
    0x224C: r"\ensuremath{\allequal}",
    0x224D: r"\ensuremath{\asymp}",
    0x224E: r"\ensuremath{\Bumpeq}",
    0x224F: r"\ensuremath{\bumpeq}",
    0x2250: r"\ensuremath{\doteq}",
    0x2251: r"\ensuremath{\doteqdot}",
    0x2252: r"\ensuremath{\fallingdotseq}",
    0x2253: r"\ensuremath{\risingdotseq}",
    0x2254: r"\ensuremath{:=}",
    0x2255: r"\ensuremath{=:}",
    0x2256: r"\ensuremath{\eqcirc}",
    0x2257: r"\ensuremath{\circeq}",
    0x2259: r"\ensuremath{\estimates}",
    0x225B: r"\ensuremath{\starequal}",
    0x225C: r"\ensuremath{\triangleq}",
    0x2260: r"\ensuremath{\neq}",
    0x2261: r"\ensuremath{\equiv}",
    0x2262: r"\ensuremath{\not\equiv}",
    0x2264: r"\ensuremath{\leq}",
    0x2265: r"\ensuremath{\geq}",
    0x2266: r"\ensuremath{\leqq}",
    0x2267: r"\ensuremath{\geqq}",
    0x2268: r"\ensuremath{\lneqq}",
    0x2269: r"\ensuremath{\gneqq}",
    0x226A: r"\ensuremath{\ll}",
    0x226B: r"\ensuremath{\gg}",
    0x226C: r"\ensuremath{\between}",
    0x226D: r"\ensuremath{\not\kern-0.3em\times}",
    0x226E: r"\ensuremath{\nless}",
    0x226F: r"\ensuremath{\ngtr}",
    0x2270: r"\ensuremath{\nleq}",
    0x2271: r"\ensuremath{\ngeq}",
    0x2272: r"\ensuremath{\lesssim}",
    0x2273: r"\ensuremath{\gtrsim}",
    0x2274: r"\ensuremath{\not\lesssim}",
    0x2275: r"\ensuremath{\not\gtrsim}",
    0x2276: r"\ensuremath{\lessgtr}",
    0x2277: r"\ensuremath{\gtrless}",
    0x2278: r"\ensuremath{\notlessgreater}",
    0x2279: r"\ensuremath{\notgreaterless}",
    0x227A: r"\ensuremath{\prec}",
    0x227B: r"\ensuremath{\succ}",
    0x227C: r"\ensuremath{\preceq}",
    0x227D: r"\ensuremath{\succeq}",
    0x227E: r"\ensuremath{\precsim}",
    0x227F: r"\ensuremath{\succsim}",
    0x2280: r"\ensuremath{\nprec}",
    0x2281: r"\ensuremath{\nsucc}",
    0x2282: r"\ensuremath{\subset}",
    0x2283: r"\ensuremath{\supset}",
    0x2284: r"\ensuremath{\not\subset}",
    0x2285: r"\ensuremath{\not\supset}",
    0x2286: r"\ensuremath{\subseteq}",
    0x2287: r"\ensuremath{\supseteq}",
    0x2288: r"\ensuremath{\nsubseteq}",
    0x2289: r"\ensuremath{\nsupseteq}",
    0x228A: r"\ensuremath{\subsetneq}",
    0x228B: r"\ensuremath{\supsetneq}",
    0x228E: r"\ensuremath{\uplus}",
    0x228F: r"\ensuremath{\sqsubset}",
    0x2290: r"\ensuremath{\sqsupset}",
    0x2291: r"\ensuremath{\sqsubseteq}",
    0x2292: r"\ensuremath{\sqsupseteq}",
    0x2293: r"\ensuremath{\sqcap}",
    0x2294: r"\ensuremath{\sqcup}",
    0x2295: r"\ensuremath{\oplus}",
    0x2296: r"\ensuremath{\ominus}",
    0x2297: r"\ensuremath{\otimes}",
    0x2298: r"\ensuremath{\oslash}",
    0x2299: r"\ensuremath{\odot}",
    0x229A: r"\ensuremath{\circledcirc}",
    0x229B: r"\ensuremath{\circledast}",
    0x229D: r"\ensuremath{\circleddash}",
    0x229E: r"\ensuremath{\boxplus}",
    0x229F: r"\ensuremath{\boxminus}",
    0x22A0: r"\ensuremath{\boxtimes}",
    0x22A1: r"\ensuremath{\boxdot}",
    0x22A2: r"\ensuremath{\vdash}",
    0x22A3: r"\ensuremath{\dashv}",
    0x22A4: r"\ensuremath{\top}",
    0x22A5: r"\ensuremath{\perp}",
    0x22A7: r"\ensuremath{\truestate}",
    0x22A8: r"\ensuremath{\forcesextra}",
    0x22A9: r"\ensuremath{\Vdash}",
    0x22AA: r"\ensuremath{\Vvdash}",
    0x22AB: r"\ensuremath{\VDash}",
    0x22AC: r"\ensuremath{\nvdash}",
    0x22AD: r"\ensuremath{\nvDash}",
    0x22AE: r"\ensuremath{\nVdash}",
    0x22AF: r"\ensuremath{\nVDash}",
    0x22B2: r"\ensuremath{\vartriangleleft}",
    0x22B3: r"\ensuremath{\vartriangleright}",
    0x22B4: r"\ensuremath{\trianglelefteq}",
    0x22B5: r"\ensuremath{\trianglerighteq}",
    0x22B6: r"\ensuremath{\original}",
    0x22B7: r"\ensuremath{\image}",
    0x22B8: r"\ensuremath{\multimap}",
    0x22B9: r"\ensuremath{\hermitconjmatrix}",
    0x22BA: r"\ensuremath{\intercal}",
    0x22BB: r"\ensuremath{\veebar}",
    0x22BE: r"\ensuremath{\rightanglearc}",
    0x22C0: r"\ensuremath{\bigwedge}",
    0x22C1: r"\ensuremath{\bigvee}",
    0x22C2: r"\ensuremath{\bigcap}",
    0x22C3: r"\ensuremath{\bigcup}",
    0x22C4: r"\ensuremath{\diamond}",
    0x22C5: r"\ensuremath{\cdot}",
    0x22C6: r"\ensuremath{\star}",
    0x22C7: r"\ensuremath{\divideontimes}",
    0x22C8: r"\ensuremath{\bowtie}",
    0x22C9: r"\ensuremath{\ltimes}",
    0x22CA: r"\ensuremath{\rtimes}",
    0x22CB: r"\ensuremath{\leftthreetimes}",
    0x22CC: r"\ensuremath{\rightthreetimes}",
    0x22CD: r"\ensuremath{\backsimeq}",
    0x22CE: r"\ensuremath{\curlyvee}",
    0x22CF: r"\ensuremath{\curlywedge}",
    0x22D0: r"\ensuremath{\Subset}",
    0x22D1: r"\ensuremath{\Supset}",
    0x22D2: r"\ensuremath{\Cap}",
    0x22D3: r"\ensuremath{\Cup}",
    0x22D4: r"\ensuremath{\pitchfork}",
    0x22D6: r"\ensuremath{\lessdot}",
    0x22D7: r"\ensuremath{\gtrdot}",
    0x22D8: r"\ensuremath{\verymuchless}",
    0x22D9: r"\ensuremath{\verymuchgreater}",
    0x22DA: r"\ensuremath{\lesseqgtr}",
    0x22DB: r"\ensuremath{\gtreqless}",
    0x22DE: r"\ensuremath{\curlyeqprec}",
    0x22DF: r"\ensuremath{\curlyeqsucc}",
    0x22E2: r"\ensuremath{\not\sqsubseteq}",
    0x22E3: r"\ensuremath{\not\sqsupseteq}",
    0x22E6: r"\ensuremath{\lnsim}",
    0x22E7: r"\ensuremath{\gnsim}",
    0x22E8: r"\ensuremath{\precedesnotsimilar}",
    0x22E9: r"\ensuremath{\succnsim}",
    0x22EA: r"\ensuremath{\ntriangleleft}",
    0x22EB: r"\ensuremath{\ntriangleright}",
    0x22EC: r"\ensuremath{\ntrianglelefteq}",
    0x22ED: r"\ensuremath{\ntrianglerighteq}",
    0x22EE: r"\ensuremath{\vdots}",
    0x22EF: r"\ensuremath{\cdots}",
    0x22F0: r"\ensuremath{\udots}",
    0x22F1: r"\ensuremath{\ddots}",
    0x2305: r"\ensuremath{\barwedge}",
    0x2306: r"\ensuremath{\varperspcorrespond}",
    0x2308: r"\ensuremath{\lceil}",
    0x2309: r"\ensuremath{\rceil}",
    0x230A: r"\ensuremath{\lfloor}",
    0x230B: r"\ensuremath{\rfloor}",
    0x2315: r"\ensuremath{\recorder}",
    0x2316: r'\ensuremath{\mathchar"2208}',
    0x231C: r"\ensuremath{\ulcorner}",
    0x231D: r"\ensuremath{\urcorner}",
    0x231E: r"\ensuremath{\llcorner}",
    0x231F: r"\ensuremath{\lrcorner}",
    0x2322: r"\ensuremath{\frown}",
    0x2323: r"\ensuremath{\smile}",
    0x23B0: r"\ensuremath{\lmoustache}",
    0x23B1: r"\ensuremath{\rmoustache}",
    0x2329: r"\textlangle",
    0x232A: r"\textrangle",
    0x2422: r"\textblank",
    0x2423: r"\textvisiblespace",
    0x25A0: r"\ensuremath{\blacksquare}",
    0x25A1: r"\ensuremath{\square}",
    0x25AA: r"{\small\ensuremath{\blacksquare}}",
    0x25AD: r"\fbox{~~}",
    0x25B3: r"\ensuremath{\bigtriangleup}",
    0x25B4: r"\ensuremath{\blacktriangle}",
    0x25B5: r"\ensuremath{\vartriangle}",
    0x25B8: r"\ensuremath{\blacktriangleright}",
    0x25B9: r"\ensuremath{\triangleright}",
    0x25BD: r"\ensuremath{\bigtriangledown}",
    0x25BE: r"\ensuremath{\blacktriangledown}",
    0x25BF: r"\ensuremath{\triangledown}",
    0x25C2: r"\ensuremath{\blacktriangleleft}",
    0x25C3: r"\ensuremath{\triangleleft}",
    0x25CA: r"\ensuremath{\lozenge}",
    0x25CB: r"\ensuremath{\bigcirc}",
    0x25E6: r"\textopenbullet",
    0x25EF: r"\textbigcircle",
    0x2662: r"\ensuremath{\diamond}",
    0x266A: r"\textmusicalnote",
    0x2669: r"\quarternote",
    0x266D: r"\flat",
    0x266E: r"\natural",
    0x266F: r"\sharp",
    0x27E8: r"\ensuremath{\langle}",
    0x27E9: r"\ensuremath{\rangle}",
    0x27F5: r"\ensuremath{\longleftarrow}",
    0x27F6: r"\ensuremath{\longrightarrow}",
    0x27F7: r"\ensuremath{\longleftrightarrow}",
    0x27F8: r"\ensuremath{\Longleftarrow}",
    0x27F9: r"\ensuremath{\Longrightarrow}",
    0x27FA: r"\ensuremath{\Longleftrightarrow}",
    0x27FC: r"\ensuremath{\longmapsto}",
    0x27FF: r"\ensuremath{\sim\joinrel\leadsto}",
    0x2993: r"\ensuremath{<\kern-0.58em(}",
    0x29EB: r"\ensuremath{\blacklozenge}",
    0x2A0F: r"\ensuremath{\clockoint}",
    0x2A16: r"\ensuremath{\sqrint}",
    0x2A3F: r"\ensuremath{\amalg}",
    0x2A6E: r"\ensuremath{\stackrel{*}{=}}",
    0x2A75: r"==",
    0x2A7D: r"\ensuremath{\leqslant}",
    0x2A7E: r"\ensuremath{\geqslant}",
    0x2A85: r"\ensuremath{\lessapprox}",
    0x2A86: r"\ensuremath{\gtrapprox}",
    0x2A87: r"\ensuremath{\lneq}",
    0x2A88: r"\ensuremath{\gneq}",
    0x2A89: r"\ensuremath{\lnapprox}",
    0x2A8A: r"\ensuremath{\gnapprox}",
    0x2A8B: r"\ensuremath{\lesseqqgtr}",
    0x2A8C: r"\ensuremath{\gtreqqless}",
    0x2A95: r"\ensuremath{\eqslantless}",
    0x2A96: r"\ensuremath{\eqslantgtr}",
    0x2AAF: r"\ensuremath{\preceq}",
    0x2AB0: r"\ensuremath{\succeq}",
    0x2AB5: r"\ensuremath{\precneqq}",
    0x2AB6: r"\ensuremath{\succneqq}",
    0x2AB7: r"\ensuremath{\precapprox}",
    0x2AB8: r"\ensuremath{\succapprox}",
    0x2AB9: r"\ensuremath{\precnapprox}",
    0x2ABA: r"\ensuremath{\succnapprox}",
    0x2AC5: r"\ensuremath{\subseteqq}",
    0x2AC6: r"\ensuremath{\supseteqq}",
    0x2ACB: r"\ensuremath{\subsetneqq}",
    0x2ACC: r"\ensuremath{\supsetneqq}",
    0x2AFD: r"\ensuremath{{{/}\!\!{/}}}",
    0x3008: r"\ensuremath{\langle}",
    0x3009: r"\ensuremath{\rangle}",
    0xFB00: r"ff",
    0xFB01: r"fi",
    0xFB02: r"fl",
    0xFB03: r"ffi",
    0xFB04: r"ffl",
    0x1D400: r"\ensuremath{\mathbf{A}}",
    0x1D401: r"\ensuremath{\mathbf{B}}",
    0x1D402: r"\ensuremath{\mathbf{C}}",
    0x1D403: r"\ensuremath{\mathbf{D}}",
    0x1D404: r"\ensuremath{\mathbf{E}}",
    0x1D405: r"\ensuremath{\mathbf{F}}",
    0x1D406: r"\ensuremath{\mathbf{G}}",
    0x1D407: r"\ensuremath{\mathbf{H}}",
    0x1D408: r"\ensuremath{\mathbf{I}}",
    0x1D409: r"\ensuremath{\mathbf{J}}",
    0x1D40A: r"\ensuremath{\mathbf{K}}",
    0x1D40B: r"\ensuremath{\mathbf{L}}",
    0x1D40C: r"\ensuremath{\mathbf{M}}",
    0x1D40D: r"\ensuremath{\mathbf{N}}",
    0x1D40E: r"\ensuremath{\mathbf{O}}",
    0x1D40F: r"\ensuremath{\mathbf{P}}",
    0x1D410: r"\ensuremath{\mathbf{Q}}",
    0x1D411: r"\ensuremath{\mathbf{R}}",
    0x1D412: r"\ensuremath{\mathbf{S}}",
    0x1D413: r"\ensuremath{\mathbf{T}}",
    0x1D414: r"\ensuremath{\mathbf{U}}",
    0x1D415: r"\ensuremath{\mathbf{V}}",
    0x1D416: r"\ensuremath{\mathbf{W}}",
    0x1D417: r"\ensuremath{\mathbf{X}}",
    0x1D418: r"\ensuremath{\mathbf{Y}}",
    0x1D419: r"\ensuremath{\mathbf{Z}}",
    0x1D41A: r"\ensuremath{\mathbf{a}}",
    0x1D41B: r"\ensuremath{\mathbf{b}}",
    0x1D41C: r"\ensuremath{\mathbf{c}}",
    0x1D41D: r"\ensuremath{\mathbf{d}}",
    0x1D41E: r"\ensuremath{\mathbf{e}}",
    0x1D41F: r"\ensuremath{\mathbf{f}}",
    0x1D420: r"\ensuremath{\mathbf{g}}",
    0x1D421: r"\ensuremath{\mathbf{h}}",
    0x1D422: r"\ensuremath{\mathbf{i}}",
    0x1D423: r"\ensuremath{\mathbf{j}}",
    0x1D424: r"\ensuremath{\mathbf{k}}",
    0x1D425: r"\ensuremath{\mathbf{l}}",
    0x1D426: r"\ensuremath{\mathbf{m}}",
    0x1D427: r"\ensuremath{\mathbf{n}}",
    0x1D428: r"\ensuremath{\mathbf{o}}",
    0x1D429: r"\ensuremath{\mathbf{p}}",
    0x1D42A: r"\ensuremath{\mathbf{q}}",
    0x1D42B: r"\ensuremath{\mathbf{r}}",
    0x1D42C: r"\ensuremath{\mathbf{s}}",
    0x1D42D: r"\ensuremath{\mathbf{t}}",
    0x1D42E: r"\ensuremath{\mathbf{u}}",
    0x1D42F: r"\ensuremath{\mathbf{v}}",
    0x1D430: r"\ensuremath{\mathbf{w}}",
    0x1D431: r"\ensuremath{\mathbf{x}}",
    0x1D432: r"\ensuremath{\mathbf{y}}",
    0x1D433: r"\ensuremath{\mathbf{z}}",
    0x1D434: r"\ensuremath{\mathit{A}}",
    0x1D435: r"\ensuremath{\mathit{B}}",
    0x1D436: r"\ensuremath{\mathit{C}}",
    0x1D437: r"\ensuremath{\mathit{D}}",
    0x1D438: r"\ensuremath{\mathit{E}}",
    0x1D439: r"\ensuremath{\mathit{F}}",
    0x1D43A: r"\ensuremath{\mathit{G}}",
    0x1D43B: r"\ensuremath{\mathit{H}}",
    0x1D43C: r"\ensuremath{\mathit{I}}",
    0x1D43D: r"\ensuremath{\mathit{J}}",
    0x1D43E: r"\ensuremath{\mathit{K}}",
    0x1D43F: r"\ensuremath{\mathit{L}}",
    0x1D440: r"\ensuremath{\mathit{M}}",
    0x1D441: r"\ensuremath{\mathit{N}}",
    0x1D442: r"\ensuremath{\mathit{O}}",
    0x1D443: r"\ensuremath{\mathit{P}}",
    0x1D444: r"\ensuremath{\mathit{Q}}",
    0x1D445: r"\ensuremath{\mathit{R}}",
    0x1D446: r"\ensuremath{\mathit{S}}",
    0x1D447: r"\ensuremath{\mathit{T}}",
    0x1D448: r"\ensuremath{\mathit{U}}",
    0x1D449: r"\ensuremath{\mathit{V}}",
    0x1D44A: r"\ensuremath{\mathit{W}}",
    0x1D44B: r"\ensuremath{\mathit{X}}",
    0x1D44C: r"\ensuremath{\mathit{Y}}",
    0x1D44D: r"\ensuremath{\mathit{Z}}",
    0x1D44E: r"\ensuremath{\mathit{a}}",
    0x1D44F: r"\ensuremath{\mathit{b}}",
    0x1D450: r"\ensuremath{\mathit{c}}",
    0x1D451: r"\ensuremath{\mathit{d}}",
    0x1D452: r"\ensuremath{\mathit{e}}",
    0x1D453: r"\ensuremath{\mathit{f}}",
    0x1D454: r"\ensuremath{\mathit{g}}",
    0x1D455: r"\ensuremath{\mathit{h}}",
    0x1D456: r"\ensuremath{\mathit{i}}",
    0x1D457: r"\ensuremath{\mathit{j}}",
    0x1D458: r"\ensuremath{\mathit{k}}",
    0x1D459: r"\ensuremath{\mathit{l}}",
    0x1D45A: r"\ensuremath{\mathit{m}}",
    0x1D45B: r"\ensuremath{\mathit{n}}",
    0x1D45C: r"\ensuremath{\mathit{o}}",
    0x1D45D: r"\ensuremath{\mathit{p}}",
    0x1D45E: r"\ensuremath{\mathit{q}}",
    0x1D45F: r"\ensuremath{\mathit{r}}",
    0x1D460: r"\ensuremath{\mathit{s}}",
    0x1D461: r"\ensuremath{\mathit{t}}",
    0x1D462: r"\ensuremath{\mathit{u}}",
    0x1D463: r"\ensuremath{\mathit{v}}",
    0x1D464: r"\ensuremath{\mathit{w}}",
    0x1D465: r"\ensuremath{\mathit{x}}",
    0x1D466: r"\ensuremath{\mathit{y}}",
    0x1D467: r"\ensuremath{\mathit{z}}",
    0x1D468: r"\ensuremath{\boldsymbol{\mathit{A}}}",
    0x1D469: r"\ensuremath{\boldsymbol{\mathit{B}}}",
    0x1D46A: r"\ensuremath{\boldsymbol{\mathit{C}}}",
    0x1D46B: r"\ensuremath{\boldsymbol{\mathit{D}}}",
    0x1D46C: r"\ensuremath{\boldsymbol{\mathit{E}}}",
    0x1D46D: r"\ensuremath{\boldsymbol{\mathit{F}}}",
    0x1D46E: r"\ensuremath{\boldsymbol{\mathit{G}}}",
    0x1D46F: r"\ensuremath{\boldsymbol{\mathit{H}}}",
    0x1D470: r"\ensuremath{\boldsymbol{\mathit{I}}}",
    0x1D471: r"\ensuremath{\boldsymbol{\mathit{J}}}",
    0x1D472: r"\ensuremath{\boldsymbol{\mathit{K}}}",
    0x1D473: r"\ensuremath{\boldsymbol{\mathit{L}}}",
    0x1D474: r"\ensuremath{\boldsymbol{\mathit{M}}}",
    0x1D475: r"\ensuremath{\boldsymbol{\mathit{N}}}",
    0x1D476: r"\ensuremath{\boldsymbol{\mathit{O}}}",
    0x1D477: r"\ensuremath{\boldsymbol{\mathit{P}}}",
    0x1D478: r"\ensuremath{\boldsymbol{\mathit{Q}}}",
    0x1D479: r"\ensuremath{\boldsymbol{\mathit{R}}}",
    0x1D47A: r"\ensuremath{\boldsymbol{\mathit{S}}}",
    0x1D47B: r"\ensuremath{\boldsymbol{\mathit{T}}}",
    0x1D47C: r"\ensuremath{\boldsymbol{\mathit{U}}}",
    0x1D47D: r"\ensuremath{\boldsymbol{\mathit{V}}}",
    0x1D47E: r"\ensuremath{\boldsymbol{\mathit{W}}}",
    0x1D47F: r"\ensuremath{\boldsymbol{\mathit{X}}}",
    0x1D480: r"\ensuremath{\boldsymbol{\mathit{Y}}}",
    0x1D481: r"\ensuremath{\boldsymbol{\mathit{Z}}}",
    0x1D482: r"\ensuremath{\boldsymbol{\mathit{a}}}",
    0x1D483: r"\ensuremath{\boldsymbol{\mathit{b}}}",
    0x1D484: r"\ensuremath{\boldsymbol{\mathit{c}}}",
    0x1D485: r"\ensuremath{\boldsymbol{\mathit{d}}}",
    0x1D486: r"\ensuremath{\boldsymbol{\mathit{e}}}",
    0x1D487: r"\ensuremath{\boldsymbol{\mathit{f}}}",
    0x1D488: r"\ensuremath{\boldsymbol{\mathit{g}}}",
    0x1D489: r"\ensuremath{\boldsymbol{\mathit{h}}}",
    0x1D48A: r"\ensuremath{\boldsymbol{\mathit{i}}}",
    0x1D48B: r"\ensuremath{\boldsymbol{\mathit{j}}}",
    0x1D48C: r"\ensuremath{\boldsymbol{\mathit{k}}}",
    0x1D48D: r"\ensuremath{\boldsymbol{\mathit{l}}}",
    0x1D48E: r"\ensuremath{\boldsymbol{\mathit{m}}}",
    0x1D48F: r"\ensuremath{\boldsymbol{\mathit{n}}}",
    0x1D490: r"\ensuremath{\boldsymbol{\mathit{o}}}",
    0x1D491: r"\ensuremath{\boldsymbol{\mathit{p}}}",
    0x1D492: r"\ensuremath{\boldsymbol{\mathit{q}}}",
    0x1D493: r"\ensuremath{\boldsymbol{\mathit{r}}}",
    0x1D494: r"\ensuremath{\boldsymbol{\mathit{s}}}",
    0x1D495: r"\ensuremath{\boldsymbol{\mathit{t}}}",
    0x1D496: r"\ensuremath{\boldsymbol{\mathit{u}}}",
    0x1D497: r"\ensuremath{\boldsymbol{\mathit{v}}}",
    0x1D498: r"\ensuremath{\boldsymbol{\mathit{w}}}",
    0x1D499: r"\ensuremath{\boldsymbol{\mathit{x}}}",
    0x1D49A: r"\ensuremath{\boldsymbol{\mathit{y}}}",
    0x1D49B: r"\ensuremath{\boldsymbol{\mathit{z}}}",
    0x1D49C: r"\ensuremath{\mathscr{A}}",
    0x1D49D: r"\ensuremath{\mathscr{B}}",
    0x1D49E: r"\ensuremath{\mathscr{C}}",
    0x1D49F: r"\ensuremath{\mathscr{D}}",
    0x1D4A0: r"\ensuremath{\mathscr{E}}",
    0x1D4A1: r"\ensuremath{\mathscr{F}}",
    0x1D4A2: r"\ensuremath{\mathscr{G}}",
    0x1D4A3: r"\ensuremath{\mathscr{H}}",
    0x1D4A4: r"\ensuremath{\mathscr{I}}",
    0x1D4A5: r"\ensuremath{\mathscr{J}}",
    0x1D4A6: r"\ensuremath{\mathscr{K}}",
    0x1D4A7: r"\ensuremath{\mathscr{L}}",
    0x1D4A8: r"\ensuremath{\mathscr{M}}",
    0x1D4A9: r"\ensuremath{\mathscr{N}}",
    0x1D4AA: r"\ensuremath{\mathscr{O}}",
    0x1D4AB: r"\ensuremath{\mathscr{P}}",
    0x1D4AC: r"\ensuremath{\mathscr{Q}}",
    0x1D4AD: r"\ensuremath{\mathscr{R}}",
    0x1D4AE: r"\ensuremath{\mathscr{S}}",
    0x1D4AF: r"\ensuremath{\mathscr{T}}",
    0x1D4B0: r"\ensuremath{\mathscr{U}}",
    0x1D4B1: r"\ensuremath{\mathscr{V}}",
    0x1D4B2: r"\ensuremath{\mathscr{W}}",
    0x1D4B3: r"\ensuremath{\mathscr{X}}",
    0x1D4B4: r"\ensuremath{\mathscr{Y}}",
    0x1D4B5: r"\ensuremath{\mathscr{Z}}",
    0x1D4B6: r"\ensuremath{\mathscr{a}}",
    0x1D4B7: r"\ensuremath{\mathscr{b}}",
    0x1D4B8: r"\ensuremath{\mathscr{c}}",
    0x1D4B9: r"\ensuremath{\mathscr{d}}",
    0x1D4BB: r"\ensuremath{\mathscr{f}}",
    0x1D4BD: r"\ensuremath{\mathscr{h}}",
    0x1D4BE: r"\ensuremath{\mathscr{i}}",
    0x1D4BF: r"\ensuremath{\mathscr{j}}",
    0x1D4C0: r"\ensuremath{\mathscr{k}}",
    0x1D4C1: r"\ensuremath{\mathscr{l}}",
    0x1D4C2: r"\ensuremath{\mathscr{m}}",
    0x1D4C3: r"\ensuremath{\mathscr{n}}",
    0x1D4C5: r"\ensuremath{\mathscr{p}}",
    0x1D4C6: r"\ensuremath{\mathscr{q}}",
    0x1D4C7: r"\ensuremath{\mathscr{r}}",
    0x1D4C8: r"\ensuremath{\mathscr{s}}",
    0x1D4C9: r"\ensuremath{\mathscr{t}}",
    0x1D4CA: r"\ensuremath{\mathscr{u}}",
    0x1D4CB: r"\ensuremath{\mathscr{v}}",
    0x1D4CC: r"\ensuremath{\mathscr{w}}",
    0x1D4CD: r"\ensuremath{\mathscr{x}}",
    0x1D4CE: r"\ensuremath{\mathscr{y}}",
    0x1D4CF: r"\ensuremath{\mathscr{z}}",
    0x1D504: r"\ensuremath{\mathfrak{A}}",
    0x1D505: r"\ensuremath{\mathfrak{B}}",
    0x1D506: r"\ensuremath{\mathfrak{C}}",
    0x1D507: r"\ensuremath{\mathfrak{D}}",
    0x1D508: r"\ensuremath{\mathfrak{E}}",
    0x1D509: r"\ensuremath{\mathfrak{F}}",
    0x1D50A: r"\ensuremath{\mathfrak{G}}",
    0x1D50B: r"\ensuremath{\mathfrak{H}}",
    0x1D50C: r"\ensuremath{\mathfrak{I}}",
    0x1D50D: r"\ensuremath{\mathfrak{J}}",
    0x1D50E: r"\ensuremath{\mathfrak{K}}",
    0x1D50F: r"\ensuremath{\mathfrak{L}}",
    0x1D510: r"\ensuremath{\mathfrak{M}}",
    0x1D511: r"\ensuremath{\mathfrak{N}}",
    0x1D512: r"\ensuremath{\mathfrak{O}}",
    0x1D513: r"\ensuremath{\mathfrak{P}}",
    0x1D514: r"\ensuremath{\mathfrak{Q}}",
    0x1D515: r"\ensuremath{\mathfrak{R}}",
    0x1D516: r"\ensuremath{\mathfrak{S}}",
    0x1D517: r"\ensuremath{\mathfrak{T}}",
    0x1D518: r"\ensuremath{\mathfrak{U}}",
    0x1D519: r"\ensuremath{\mathfrak{V}}",
    0x1D51A: r"\ensuremath{\mathfrak{W}}",
    0x1D51B: r"\ensuremath{\mathfrak{X}}",
    0x1D51C: r"\ensuremath{\mathfrak{Y}}",
    0x1D51D: r"\ensuremath{\mathfrak{Z}}",
    0x1D51E: r"\ensuremath{\mathfrak{a}}",
    0x1D51F: r"\ensuremath{\mathfrak{b}}",
    0x1D520: r"\ensuremath{\mathfrak{c}}",
    0x1D521: r"\ensuremath{\mathfrak{d}}",
    0x1D522: r"\ensuremath{\mathfrak{e}}",
    0x1D523: r"\ensuremath{\mathfrak{f}}",
    0x1D524: r"\ensuremath{\mathfrak{g}}",
    0x1D525: r"\ensuremath{\mathfrak{h}}",
    0x1D526: r"\ensuremath{\mathfrak{i}}",
    0x1D527: r"\ensuremath{\mathfrak{j}}",
    0x1D528: r"\ensuremath{\mathfrak{k}}",
    0x1D529: r"\ensuremath{\mathfrak{l}}",
    0x1D52A: r"\ensuremath{\mathfrak{m}}",
    0x1D52B: r"\ensuremath{\mathfrak{n}}",
    0x1D52C: r"\ensuremath{\mathfrak{o}}",
    0x1D52D: r"\ensuremath{\mathfrak{p}}",
    0x1D52E: r"\ensuremath{\mathfrak{q}}",
    0x1D52F: r"\ensuremath{\mathfrak{r}}",
    0x1D530: r"\ensuremath{\mathfrak{s}}",
    0x1D531: r"\ensuremath{\mathfrak{t}}",
    0x1D532: r"\ensuremath{\mathfrak{u}}",
    0x1D533: r"\ensuremath{\mathfrak{v}}",
    0x1D534: r"\ensuremath{\mathfrak{w}}",
    0x1D535: r"\ensuremath{\mathfrak{x}}",
    0x1D536: r"\ensuremath{\mathfrak{y}}",
    0x1D537: r"\ensuremath{\mathfrak{z}}",
    0x1D538: r"\ensuremath{\mathbb{A}}",
    0x1D539: r"\ensuremath{\mathbb{B}}",
    0x1D53A: r"\ensuremath{\mathbb{C}}",
    0x1D53B: r"\ensuremath{\mathbb{D}}",
    0x1D53C: r"\ensuremath{\mathbb{E}}",
    0x1D53D: r"\ensuremath{\mathbb{F}}",
    0x1D53E: r"\ensuremath{\mathbb{G}}",
    0x1D53F: r"\ensuremath{\mathbb{H}}",
    0x1D540: r"\ensuremath{\mathbb{I}}",
    0x1D541: r"\ensuremath{\mathbb{J}}",
    0x1D542: r"\ensuremath{\mathbb{K}}",
    0x1D543: r"\ensuremath{\mathbb{L}}",
    0x1D544: r"\ensuremath{\mathbb{M}}",
    0x1D545: r"\ensuremath{\mathbb{N}}",
    0x1D546: r"\ensuremath{\mathbb{O}}",
    0x1D547: r"\ensuremath{\mathbb{P}}",
    0x1D548: r"\ensuremath{\mathbb{Q}}",
    0x1D549: r"\ensuremath{\mathbb{R}}",
    0x1D54A: r"\ensuremath{\mathbb{S}}",
    0x1D54B: r"\ensuremath{\mathbb{T}}",
    0x1D54C: r"\ensuremath{\mathbb{U}}",
    0x1D54D: r"\ensuremath{\mathbb{V}}",
    0x1D54E: r"\ensuremath{\mathbb{W}}",
    0x1D54F: r"\ensuremath{\mathbb{X}}",
    0x1D550: r"\ensuremath{\mathbb{Y}}",
    0x1D551: r"\ensuremath{\mathbb{Z}}",
    0x1D552: r"\ensuremath{\mathbb{a}}",
    0x1D553: r"\ensuremath{\mathbb{b}}",
    0x1D554: r"\ensuremath{\mathbb{c}}",
    0x1D555: r"\ensuremath{\mathbb{d}}",
    0x1D556: r"\ensuremath{\mathbb{e}}",
    0x1D557: r"\ensuremath{\mathbb{f}}",
    0x1D558: r"\ensuremath{\mathbb{g}}",
    0x1D559: r"\ensuremath{\mathbb{h}}",
    0x1D55A: r"\ensuremath{\mathbb{i}}",
    0x1D55B: r"\ensuremath{\mathbb{j}}",
    0x1D55C: r"\ensuremath{\mathbb{k}}",
    0x1D55D: r"\ensuremath{\mathbb{l}}",
    0x1D55E: r"\ensuremath{\mathbb{m}}",
    0x1D55F: r"\ensuremath{\mathbb{n}}",
    0x1D560: r"\ensuremath{\mathbb{o}}",
    0x1D561: r"\ensuremath{\mathbb{p}}",
    0x1D562: r"\ensuremath{\mathbb{q}}",
    0x1D563: r"\ensuremath{\mathbb{r}}",
    0x1D564: r"\ensuremath{\mathbb{s}}",
    0x1D565: r"\ensuremath{\mathbb{t}}",
    0x1D566: r"\ensuremath{\mathbb{u}}",
    0x1D567: r"\ensuremath{\mathbb{v}}",
    0x1D568: r"\ensuremath{\mathbb{w}}",
    0x1D569: r"\ensuremath{\mathbb{x}}",
    0x1D56A: r"\ensuremath{\mathbb{y}}",
    0x1D56B: r"\ensuremath{\mathbb{z}}",
    0x1D5A0: r"\ensuremath{\mathsf{A}}",
    0x1D5A1: r"\ensuremath{\mathsf{B}}",
    0x1D5A2: r"\ensuremath{\mathsf{C}}",
    0x1D5A3: r"\ensuremath{\mathsf{D}}",
    0x1D5A4: r"\ensuremath{\mathsf{E}}",
    0x1D5A5: r"\ensuremath{\mathsf{F}}",
    0x1D5A6: r"\ensuremath{\mathsf{G}}",
    0x1D5A7: r"\ensuremath{\mathsf{H}}",
    0x1D5A8: r"\ensuremath{\mathsf{I}}",
    0x1D5A9: r"\ensuremath{\mathsf{J}}",
    0x1D5AA: r"\ensuremath{\mathsf{K}}",
    0x1D5AB: r"\ensuremath{\mathsf{L}}",
    0x1D5AC: r"\ensuremath{\mathsf{M}}",
    0x1D5AD: r"\ensuremath{\mathsf{N}}",
    0x1D5AE: r"\ensuremath{\mathsf{O}}",
    0x1D5AF: r"\ensuremath{\mathsf{P}}",
    0x1D5B0: r"\ensuremath{\mathsf{Q}}",
    0x1D5B1: r"\ensuremath{\mathsf{R}}",
    0x1D5B2: r"\ensuremath{\mathsf{S}}",
    0x1D5B3: r"\ensuremath{\mathsf{T}}",
    0x1D5B4: r"\ensuremath{\mathsf{U}}",
    0x1D5B5: r"\ensuremath{\mathsf{V}}",
    0x1D5B6: r"\ensuremath{\mathsf{W}}",
    0x1D5B7: r"\ensuremath{\mathsf{X}}",
    0x1D5B8: r"\ensuremath{\mathsf{Y}}",
    0x1D5B9: r"\ensuremath{\mathsf{Z}}",
    0x1D5BA: r"\ensuremath{\mathsf{a}}",
    0x1D5BB: r"\ensuremath{\mathsf{b}}",
    0x1D5BC: r"\ensuremath{\mathsf{c}}",
    0x1D5BD: r"\ensuremath{\mathsf{d}}",
    0x1D5BE: r"\ensuremath{\mathsf{e}}",
    0x1D5BF: r"\ensuremath{\mathsf{f}}",
    0x1D5C0: r"\ensuremath{\mathsf{g}}",
    0x1D5C1: r"\ensuremath{\mathsf{h}}",
    0x1D5C2: r"\ensuremath{\mathsf{i}}",
    0x1D5C3: r"\ensuremath{\mathsf{j}}",
    0x1D5C4: r"\ensuremath{\mathsf{k}}",
    0x1D5C5: r"\ensuremath{\mathsf{l}}",
    0x1D5C6: r"\ensuremath{\mathsf{m}}",
    0x1D5C7: r"\ensuremath{\mathsf{n}}",
    0x1D5C8: r"\ensuremath{\mathsf{o}}",
    0x1D5C9: r"\ensuremath{\mathsf{p}}",
    0x1D5CA: r"\ensuremath{\mathsf{q}}",
    0x1D5CB: r"\ensuremath{\mathsf{r}}",
    0x1D5CC: r"\ensuremath{\mathsf{s}}",
    0x1D5CD: r"\ensuremath{\mathsf{t}}",
    0x1D5CE: r"\ensuremath{\mathsf{u}}",
    0x1D5CF: r"\ensuremath{\mathsf{v}}",
    0x1D5D0: r"\ensuremath{\mathsf{w}}",
    0x1D5D1: r"\ensuremath{\mathsf{x}}",
    0x1D5D2: r"\ensuremath{\mathsf{y}}",
    0x1D5D3: r"\ensuremath{\mathsf{z}}",
    0x1D670: r"\ensuremath{\mathtt{A}}",
    0x1D671: r"\ensuremath{\mathtt{B}}",
    0x1D672: r"\ensuremath{\mathtt{C}}",
    0x1D673: r"\ensuremath{\mathtt{D}}",
    0x1D674: r"\ensuremath{\mathtt{E}}",
    0x1D675: r"\ensuremath{\mathtt{F}}",
    0x1D676: r"\ensuremath{\mathtt{G}}",
    0x1D677: r"\ensuremath{\mathtt{H}}",
    0x1D678: r"\ensuremath{\mathtt{I}}",
    0x1D679: r"\ensuremath{\mathtt{J}}",
    0x1D67A: r"\ensuremath{\mathtt{K}}",
    0x1D67B: r"\ensuremath{\mathtt{L}}",
    0x1D67C: r"\ensuremath{\mathtt{M}}",
    0x1D67D: r"\ensuremath{\mathtt{N}}",
    0x1D67E: r"\ensuremath{\mathtt{O}}",
    0x1D67F: r"\ensuremath{\mathtt{P}}",
    0x1D680: r"\ensuremath{\mathtt{Q}}",
    0x1D681: r"\ensuremath{\mathtt{R}}",
    0x1D682: r"\ensuremath{\mathtt{S}}",
    0x1D683: r"\ensuremath{\mathtt{T}}",
    0x1D684: r"\ensuremath{\mathtt{U}}",
    0x1D685: r"\ensuremath{\mathtt{V}}",
    0x1D686: r"\ensuremath{\mathtt{W}}",
    0x1D687: r"\ensuremath{\mathtt{X}}",
    0x1D688: r"\ensuremath{\mathtt{Y}}",
    0x1D689: r"\ensuremath{\mathtt{Z}}",
    0x1D68A: r"\ensuremath{\mathtt{a}}",
    0x1D68B: r"\ensuremath{\mathtt{b}}",
    0x1D68C: r"\ensuremath{\mathtt{c}}",
    0x1D68D: r"\ensuremath{\mathtt{d}}",
    0x1D68E: r"\ensuremath{\mathtt{e}}",
    0x1D68F: r"\ensuremath{\mathtt{f}}",
    0x1D690: r"\ensuremath{\mathtt{g}}",
    0x1D691: r"\ensuremath{\mathtt{h}}",
    0x1D692: r"\ensuremath{\mathtt{i}}",
    0x1D693: r"\ensuremath{\mathtt{j}}",
    0x1D694: r"\ensuremath{\mathtt{k}}",
    0x1D695: r"\ensuremath{\mathtt{l}}",
    0x1D696: r"\ensuremath{\mathtt{m}}",
    0x1D697: r"\ensuremath{\mathtt{n}}",
    0x1D698: r"\ensuremath{\mathtt{o}}",
    0x1D699: r"\ensuremath{\mathtt{p}}",
    0x1D69A: r"\ensuremath{\mathtt{q}}",
    0x1D69B: r"\ensuremath{\mathtt{r}}",
    0x1D69C: r"\ensuremath{\mathtt{s}}",
    0x1D69D: r"\ensuremath{\mathtt{t}}",
    0x1D69E: r"\ensuremath{\mathtt{u}}",
    0x1D69F: r"\ensuremath{\mathtt{v}}",
    0x1D6A0: r"\ensuremath{\mathtt{w}}",
    0x1D6A1: r"\ensuremath{\mathtt{x}}",
    0x1D6A2: r"\ensuremath{\mathtt{y}}",
    0x1D6A3: r"\ensuremath{\mathtt{z}}",
    0x1D7CE: r"\ensuremath{\mathbf{0}}",
    0x1D7CF: r"\ensuremath{\mathbf{1}}",
    0x1D7D0: r"\ensuremath{\mathbf{2}}",
    0x1D7D1: r"\ensuremath{\mathbf{3}}",
    0x1D7D2: r"\ensuremath{\mathbf{4}}",
    0x1D7D3: r"\ensuremath{\mathbf{5}}",
    0x1D7D4: r"\ensuremath{\mathbf{6}}",
    0x1D7D5: r"\ensuremath{\mathbf{7}}",
    0x1D7D6: r"\ensuremath{\mathbf{8}}",
    0x1D7D7: r"\ensuremath{\mathbf{9}}",
    0x1D7D8: r"\ensuremath{\mathbb{0}}",
    0x1D7D9: r"\ensuremath{\mathbb{1}}",
    0x1D7DA: r"\ensuremath{\mathbb{2}}",
    0x1D7DB: r"\ensuremath{\mathbb{3}}",
    0x1D7DC: r"\ensuremath{\mathbb{4}}",
    0x1D7DD: r"\ensuremath{\mathbb{5}}",
    0x1D7DE: r"\ensuremath{\mathbb{6}}",
    0x1D7DF: r"\ensuremath{\mathbb{7}}",
    0x1D7E0: r"\ensuremath{\mathbb{8}}",
    0x1D7E1: r"\ensuremath{\mathbb{9}}",
    0x1D7E2: r"\ensuremath{\mathsf{0}}",
    0x1D7E3: r"\ensuremath{\mathsf{1}}",
    0x1D7E4: r"\ensuremath{\mathsf{2}}",
    0x1D7E5: r"\ensuremath{\mathsf{3}}",
    0x1D7E6: r"\ensuremath{\mathsf{4}}",
    0x1D7E7: r"\ensuremath{\mathsf{5}}",
    0x1D7E8: r"\ensuremath{\mathsf{6}}",
    0x1D7E9: r"\ensuremath{\mathsf{7}}",
    0x1D7EA: r"\ensuremath{\mathsf{8}}",
    0x1D7EB: r"\ensuremath{\mathsf{9}}",
    0x1D7F6: r"\ensuremath{\mathtt{0}}",
    0x1D7F7: r"\ensuremath{\mathtt{1}}",
    0x1D7F8: r"\ensuremath{\mathtt{2}}",
    0x1D7F9: r"\ensuremath{\mathtt{3}}",
    0x1D7FA: r"\ensuremath{\mathtt{4}}",
    0x1D7FB: r"\ensuremath{\mathtt{5}}",
    0x1D7FC: r"\ensuremath{\mathtt{6}}",
    0x1D7FD: r"\ensuremath{\mathtt{7}}",
    0x1D7FE: r"\ensuremath{\mathtt{8}}",
    0x1D7FF: r"\ensuremath{\mathtt{9}}",
})

QUOTE_REPLACEMENT = "''"


def transliterate(text: str, *, escape_quotes: bool = False) -> str:
    """Replace every non-ASCII character of `text` by `{<latex>}`.

    Args:
        text: Input string; ASCII characters pass through untouched.
        escape_quotes: Also replace `"` by `{''}`. A bare double quote is
            interpreted by babel's german shorthands, so some styles prefer it
            escaped. A quote right after a backslash is an umlaut accent
            (`\\"a`) and is kept.

    Raises:
        UnmappedCharacterError: a character is missing from the table.
    """
    if text.isascii() and not (escape_quotes and '"' in text):
        return text

    out = []
    for idx, char in enumerate(text):
        if char.isascii():
            if escape_quotes and char == '"' and (idx == 0 or text[idx - 1] != "\\"):
                out.append("{" + QUOTE_REPLACEMENT + "}")
            else:
                out.append(char)
            continue
        latex = UNICODE_TO_LATEX.get(ord(char))
        if latex is None:
            raise UnmappedCharacterError(char, text)
        out.append("{" + latex + "}")
    return "".join(out)
