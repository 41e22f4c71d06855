"""
どこで: `engine.core` サブパッケージ。
何を: フレーム駆動（Tickable/FrameClock）・時刻源・整数ジオメトリ・描画ウィンドウを提供。
なぜ: ウィジェット層（engine.widget）と実行層（api）から再利用する基盤を構成するため。
"""
