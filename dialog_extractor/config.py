"""
Modulo per la gestione della configurazione dell'estrattore di dialoghi
"""
import copy
import os
import yaml
from datetime import timedelta
from typing import Dict, Any, Optional

from .core import parse_threshold


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'threshold': 1.5,             # Secondi di silenzio ancora uniti in un unico intervallo
        'skip_chapters': [],          # Titoli dei capitoli da escludere
        'skip': None,                 # Indici dei capitoli da escludere (es. "0,2")
        'fragment_extension': 'mp3',
        'logging': {
            'level': 'INFO',
            'file': None,
        },
    }

    NESTED_KEYS = ('logging',)

    def __init__(self, config_file: Optional[str] = None):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
        """
        # Deep copy per evitare modifiche ai default
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise Exception(f"Errore nel caricamento del file di configurazione: {e}")

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise Exception("Errore nel caricamento del file di configurazione: "
                            "il contenuto deve essere una mappa")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS and isinstance(value, dict):
                if not isinstance(self.config.get(key), dict):
                    self.config[key] = {}
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Merge profondo di dizionari nested

        Args:
            base: Dizionario base da aggiornare
            update: Dizionario con gli aggiornamenti
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione

        Args:
            args: Dizionario con gli argomenti da CLI
        """
        for key, value in args.items():
            if value is None:
                continue
            if key in self.NESTED_KEYS and isinstance(value, dict):
                self._deep_merge(self.config.setdefault(key, {}),
                                 {k: v for k, v in value.items() if v is not None})
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Ottiene un valore di configurazione

        Args:
            key: Chiave della configurazione
            default: Valore di default se la chiave non esiste

        Returns:
            Il valore della configurazione
        """
        return self.config.get(key, default)

    def get_threshold(self) -> timedelta:
        """Soglia di unione come ``timedelta`` (solleva ``ValueError`` se non valida)"""
        return parse_threshold(self.config.get('threshold'))

    def get_all(self) -> Dict[str, Any]:
        """
        Ottiene tutta la configurazione

        Returns:
            Dizionario con tutta la configurazione
        """
        return self.config.copy()
