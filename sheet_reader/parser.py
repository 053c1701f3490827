"""
Delimited-Text Parser
Parser CSV sederhana: baris pertama = header

Parser bekerja per baris. Field ber-quote yang berisi line break
akan terpecah jadi dua baris. Hanya baris dengan panjang nol yang
dibuang, jadi baris kosong dari sheet satu kolom ikut hilang
sedangkan baris seperti ",," tetap ada.
"""
import enum
import re
from typing import Dict, List

Row = List[str]
Record = Dict[str, str]

LINE_BREAK = re.compile(r'\r\n?')


class ParserState(enum.Enum):
    UNQUOTED = 'unquoted'
    QUOTED = 'quoted'


def parse_line(line: str) -> Row:
    """Pecah satu baris CSV jadi list field (menangani quote dan koma)"""
    fields: Row = []
    buffer: List[str] = []
    state = ParserState.UNQUOTED
    i = 0

    while i < len(line):
        ch = line[i]
        if state is ParserState.QUOTED:
            if ch == '"':
                if line[i + 1:i + 2] == '"':
                    # "" di dalam quote = satu tanda kutip literal
                    buffer.append('"')
                    i += 1
                else:
                    state = ParserState.UNQUOTED
            else:
                buffer.append(ch)
        elif ch == ',':
            fields.append(''.join(buffer))
            buffer = []
        elif ch == '"':
            state = ParserState.QUOTED
        else:
            buffer.append(ch)
        i += 1

    fields.append(''.join(buffer))
    return fields


def split_lines(document: str) -> List[str]:
    """Normalisasi line break lalu buang baris kosong"""
    return [line for line in LINE_BREAK.sub('\n', document).split('\n') if line]


def parse_rows(document: str) -> List[Row]:
    """Parse seluruh dokumen CSV jadi list baris"""
    return [parse_line(line) for line in split_lines(document)]


def rows_to_records(rows: List[Row]) -> List[Record]:
    """Gabungkan header (baris pertama) dengan tiap baris data"""
    if not rows:
        return []

    header, data = rows[0], rows[1:]
    return [
        {name: row[i] if i < len(row) else '' for i, name in enumerate(header)}
        for row in data
    ]


def to_records(document: str) -> List[Record]:
    """
    Parse dokumen CSV jadi list record

    Kolom yang kurang diisi string kosong, kolom berlebih dibuang.
    Dokumen kosong menghasilkan list kosong.
    """
    return rows_to_records(parse_rows(document))
