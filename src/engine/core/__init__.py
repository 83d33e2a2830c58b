"""
どこで: `engine.core` サブパッケージ。
何を: コンテンツストリーム命令（Operator）・演算子コンストラクタ・角度・アフィン行列・SVG パス変換を提供。
なぜ: 描画コンパイラの葉となる基盤を構成し、上位層（drawings/export/api）から再利用可能にするため。
"""
