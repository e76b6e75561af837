from dependency_injector import containers, providers

from common.file_watcher.watcher import FileChangeWatcher
from common.models import PollerSettings
from metadata_enricher.metadata_monitor import MetadataFileMonitor
from metadata_enricher.oneagent_metadata_enricher import OneAgentMetadataEnricher


class FilePollerContainer(containers.DeclarativeContainer):
    config = providers.Configuration()

    # one watcher per file, so never a singleton
    file_change_watcher = providers.Factory(FileChangeWatcher)

    metadata_monitor = providers.Factory(MetadataFileMonitor)

    metadata_enricher = providers.Factory(
        OneAgentMetadataEnricher,
        indirection_file_name=config.indirection_file,
    )


def create_container() -> containers.Container:
    """Build a container configured from defaults overridden by the environment."""
    container = FilePollerContainer()
    container.config.from_dict(PollerSettings.from_env().model_dump())
    return container


container = create_container()
