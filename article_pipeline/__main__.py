from article_pipeline.main import main

main()
