"""
どこで: `engine` パッケージ。
何を: フレーム駆動の基盤（core）とウィジェット層（widget）。
なぜ: 実行層（api）から GUI 依存の少ない部品として再利用するため。
"""
