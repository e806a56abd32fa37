"""
blokhouse: CMDB asset export for configuration management tools.

Projects configuration items exported from the Blokhouse CMDB into the
formats consumed by automation tooling.

Main features:
- Ansible dynamic inventory (usable directly as an inventory script)
- Puppet External Node Classifier YAML (usable as an ENC script)
- Chef::Node documents and Chef data bag items
- Schema validation of asset exports
"""

__version__ = "0.1.0"
