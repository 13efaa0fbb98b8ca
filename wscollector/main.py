"""
Point d'entrée de l'outil de collecte

Exécution unique, sans argument : toute la configuration est constante.
Le code de sortie vaut 0 en fin de collecte normale, 1 si le journal ou
le dossier de travail sont inaccessibles.
"""

import sys

from wscollector.core.collector import ConfigurationCollector
from wscollector.core.config import CollectorConfig
from wscollector.core.context import RunContext
from wscollector.core.errors import CollectionLogError, WorkingDirectoryError
from wscollector.core.logger import CollectionLogger


def print_progress(step: int, total: int, label: str):
    """Affiche la progression dans la console (non journalisée)"""
    print(f"[{step}/{total}] {label}...")


def main(config=None, context=None, **providers):
    """
    Lance une collecte complète

    Args:
        config: Instance de CollectorConfig (valeurs par défaut sinon)
        context: Instance de RunContext (construit depuis l'environnement sinon)
        providers: Fournisseurs inventory, mail, proxy (Windows sinon)

    Returns:
        int: Code de sortie
    """
    config = config or CollectorConfig()
    if not config.validate():
        print("❌ Configuration invalide")
        return 1

    context = context or RunContext.build(config)
    logger = CollectionLogger(context.log_file_path, context.verbosity)

    try:
        collector = ConfigurationCollector(context, logger, progress=print_progress, **providers)
        summary = collector.run()
    except (WorkingDirectoryError, CollectionLogError) as e:
        print(f"❌ Erreur: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n🛑 Arrêt demandé par l'utilisateur")
        return 1
    finally:
        logger.close()

    print(f"Collection complete. Files saved to {summary.working_directory}, "
          f"log file {context.log_file_name}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
