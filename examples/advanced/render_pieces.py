"""Stitch evaluated code back between markup pieces.

The scanner only splits; evaluating the code pieces is up to the caller.
Here each code piece is looked up in a dict of values.
"""

from tessera import PieceKind, scan_pieces

values = {"title": "Tessera", "count": "3"}
template = "<h1>{{title}}</h1>\n<p>{{count}} pieces</p>\n"

out = []
for piece in scan_pieces(template):
    if piece.kind is PieceKind.CODE:
        out.append(values[piece.text.strip()])
    else:
        out.append(piece.text)

print("".join(out))
