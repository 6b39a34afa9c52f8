"""Configuração do pytest para o cliente Postmark."""

import sys
from pathlib import Path

# src/ para os pacotes e a raiz para tests.fakes, mesmo sem instalar
_root = Path(__file__).parent.parent
for _path in (_root / "src", _root):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))
