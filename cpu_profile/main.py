"""
Point d'entrée en ligne de commande du profileur CPU

Affiche le profil CPU de la machine au format JSON ou texte, ou
l'écrit dans un fichier.
"""

import sys
import json
import argparse

from cpu_profile.core.config import OUTPUT_FORMATS, LOG_LEVELS, ProfileConfig, create_default_config
from cpu_profile.core.errors import ProfileError
from cpu_profile.core.logger import ProfileLogger
from cpu_profile.core.profile import PROFILE_FIELDS
from cpu_profile.core.prober import PlatformProber


def format_value(value) -> str:
    """Représentation texte d'une valeur du profil"""
    if isinstance(value, list):
        return ', '.join(value)
    return str(value)


def render_profile(data: dict, output_format: str, indent: int = 2) -> str:
    """
    Met en forme le profil

    Args:
        data: Profil sous forme de dictionnaire
        output_format: 'json' ou 'text'
        indent: Indentation JSON

    Returns:
        str: Profil formaté
    """
    if output_format == 'text':
        width = max(len(key) for key in data)
        return '\n'.join(f"{key.ljust(width)} : {format_value(value)}" for key, value in data.items())
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cpu-profile',
        description='Profil CPU - processeurs, cœurs, threads et hyper-threading de la machine'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Chemin vers le fichier de configuration'
    )

    parser.add_argument(
        '--format', '-f',
        choices=OUTPUT_FORMATS,
        help='Format de sortie (par défaut: celui de la configuration)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Fichier de sortie pour le profil'
    )

    parser.add_argument(
        '--field',
        choices=PROFILE_FIELDS,
        help='Affiche un seul champ du profil'
    )

    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        help='Niveau de log (prioritaire sur la configuration)'
    )

    parser.add_argument(
        '--create-config',
        action='store_true',
        help='Crée un fichier de configuration par défaut'
    )

    parser.add_argument(
        '--validate-config',
        action='store_true',
        help='Valide la configuration actuelle'
    )

    return parser


def main(argv=None) -> int:
    """
    Point d'entrée principal avec gestion des arguments de ligne de commande
    """
    args = build_parser().parse_args(argv)

    if args.create_config:
        try:
            config = create_default_config(args.config or ProfileConfig().config_file)
        except OSError as e:
            print(f"❌ Erreur création configuration: {e}", file=sys.stderr)
            return 1
        print(f"✅ Configuration par défaut créée: {config.config_file}")
        return 0

    config = ProfileConfig(args.config)

    if args.validate_config:
        if config.validate():
            print("✅ Configuration valide")
            return 0
        print("❌ Configuration invalide")
        return 1

    logger = ProfileLogger(config, level=args.log_level)
    output_config = config.get_output_config()
    output_format = args.format or output_config['format']

    try:
        profile = PlatformProber(config=config, logger=logger).all_profile()
    except ProfileError as e:
        print(f"❌ Erreur: {e}", file=sys.stderr)
        return 1

    data = profile.to_dict()
    if args.field:
        data = {args.field: data[args.field]}

    if args.field and output_format == 'text':
        rendered = format_value(data[args.field])
    else:
        rendered = render_profile(data, output_format, output_config['indent'])

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(rendered + '\n')
        except OSError as e:
            print(f"❌ Erreur écriture {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"✅ Profil sauvegardé dans: {args.output}")
    else:
        print(rendered)

    return 0


if __name__ == '__main__':
    sys.exit(main())
