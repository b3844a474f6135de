"""
どこで: `util` パッケージ。
何を: 構成ファイル（YAML）の読み込みヘルパ。
"""
