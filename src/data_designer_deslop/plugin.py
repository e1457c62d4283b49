from data_designer.plugins.plugin import Plugin, PluginType

deslop_plugin = Plugin(
    config_qualified_name="data_designer_deslop.config.DeslopColumnConfig",
    impl_qualified_name="data_designer_deslop.generator.DeslopColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
