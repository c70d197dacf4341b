#
# file:     netscaler_fingerprint/__init__.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
# Fingerprint Citrix NetScaler builds at scale using the GZIP timestamp of rdx_en.json.gz.
#
# Blog on how to fingerprint Citrix NetScaler devices using timestamp metadata of a GZIP file or hash:
#  - https://blog.fox-it.com/2022/12/28/cve-2022-27510-cve-2022-27518-measuring-citrix-adc-gateway-version-adoption-on-the-internet/
#
__version__ = "1.0.0"
